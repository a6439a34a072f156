import logging

from bpe.byte_remap import remap_bytes
from bpe.config import TrainerConfig
from bpe.corpus import Corpus
from bpe.learn import Encoder, learn
from bpe.tokenization import get_tokenizer

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class Trainer:
    def __init__(self, config: TrainerConfig) -> None:
        self.config = config
        self.tokenizer = get_tokenizer(config.tokenizer)

    def build_corpus(self, text: str) -> Corpus:
        """Split the text into words and count them. In byte-level mode every word is
        spelled with the printable symbols of its UTF-8 bytes.
        """
        words = self.tokenizer(text)
        if self.config.byte_level:
            words = [remap_bytes(word) for word in words]
        return Corpus.from_words(words)

    def train(self, text: str) -> Encoder:
        corpus = self.build_corpus(text)
        logging.info(f"Built a corpus of {corpus.size()} distinct words")

        encoder = learn(
            corpus,
            symbols=self.config.symbols,
            min_freq=self.config.min_freq,
            mark_end_of_word=self.config.mark_end_of_word,
            log_every=self.config.log_every,
        )
        logging.info(
            f"Learned {len(encoder.pairs)} of {self.config.symbols} merges | "
            f"Max symbol: {encoder.max_symbol}"
        )
        return encoder
