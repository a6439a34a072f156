import argparse
import logging
import pathlib

from bpe.config import TrainerConfig
from bpe.serialization import save_encoder
from bpe.trainer import Trainer


def main() -> None:
    # fmt: off
    # Parse command line arguments
    parser = argparse.ArgumentParser(description="Learn a byte pair encoding from a text corpus")

    # I/O
    parser.add_argument("--input-file", type=str, required=True, help="Text file to learn from")
    parser.add_argument("--output-file", type=str, default="encoder.json", help="Where to write the learned encoder")

    # Training
    parser.add_argument("--symbols", type=int, default=1000, help="Maximum number of merges (new symbols) to learn")
    parser.add_argument("--min-freq", type=int, default=2, help="Stop once the most frequent pair occurs fewer times")
    parser.add_argument("--tokenizer", type=str, default="simple", help="How to split the text into words: simple|gpt2|gpt4")
    parser.add_argument("--byte-level", action="store_true", help="Learn on the UTF-8 bytes of each word")
    parser.add_argument("--no-mark-end-of-word", action="store_true", help="Do not tell pairs at the end of a word apart")
    parser.add_argument("--log-every", type=int, default=100, help="Log progress every this many merges")
    # fmt: on

    args = parser.parse_args()
    for arg_name, arg_value in vars(args).items():
        logging.info(f"{arg_name}: {arg_value}")

    config = TrainerConfig(
        symbols=args.symbols,
        min_freq=args.min_freq,
        tokenizer=args.tokenizer,
        byte_level=args.byte_level,
        mark_end_of_word=not args.no_mark_end_of_word,
        log_every=args.log_every,
    )

    text = pathlib.Path(args.input_file).read_text(encoding="utf-8")
    encoder = Trainer(config).train(text)

    save_encoder(encoder, args.output_file)
    logging.info(f"Saved encoder to {args.output_file}")


if __name__ == "__main__":
    main()
