import unittest

from bpe.byte_remap import restore_bytes
from bpe.config import TrainerConfig
from bpe.pair import Pair
from bpe.trainer import Trainer


class TestTrainerConfig(unittest.TestCase):
    def test_defaults(self):
        config = TrainerConfig()
        self.assertEqual(config.symbols, 1000)
        self.assertEqual(config.min_freq, 2)
        self.assertEqual(config.tokenizer, "simple")
        self.assertFalse(config.byte_level)
        self.assertTrue(config.mark_end_of_word)

    def test_invalid_values(self):
        self.assertRaises(ValueError, TrainerConfig, min_freq=0)
        self.assertRaises(ValueError, TrainerConfig, log_every=0)


class TestTrainer(unittest.TestCase):
    def setUp(self):
        self.text = "the cat sat on the mat\nthen the cat ate the rat\n"

    def test_build_corpus(self):
        trainer = Trainer(TrainerConfig())
        corpus = trainer.build_corpus("the cat the")
        self.assertEqual(corpus.size(), 2)
        self.assertEqual(corpus.text(0), "the")
        self.assertEqual(corpus.frequency(0), 2)

    def test_build_corpus_at_byte_level(self):
        trainer = Trainer(TrainerConfig(tokenizer="gpt2", byte_level=True))
        corpus = trainer.build_corpus("the cat the")
        self.assertEqual(
            [corpus.text(i) for i in range(corpus.size())], ["the", "Ġcat", "Ġthe"]
        )
        self.assertEqual(restore_bytes(corpus.text(1)), " cat")

    def test_train(self):
        trainer = Trainer(TrainerConfig(symbols=3, min_freq=2, log_every=1))
        with self.assertLogs(level="INFO") as logs:
            encoder = trainer.train(self.text)

        # (t, h) occurs 5 times. Then (a, -t) and (u, -e) both occur 4 times, where
        # 'u' is the symbol that replaced (t, h)
        self.assertEqual(
            encoder.pairs,
            (
                Pair(ord("t"), ord("h")),
                Pair(ord("a"), ord("t"), word_end=True),
                Pair(ord("u"), ord("e"), word_end=True),
            ),
        )
        self.assertTrue(any("Learned 3 of 3 merges" in line for line in logs.output))

    def test_train_with_unknown_tokenizer(self):
        self.assertRaises(ValueError, Trainer, TrainerConfig(tokenizer="unknown"))


if __name__ == "__main__":
    unittest.main()
