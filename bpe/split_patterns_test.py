import unittest

import regex as re

from bpe.split_patterns import GPT2_SPLIT_PATTERN, GPT4_SPLIT_PATTERN


class TestSplitPatterns(unittest.TestCase):
    def test_gpt2_split_pattern(self):
        pattern = re.compile(GPT2_SPLIT_PATTERN)

        # Words keep their leading space, so " how" and "how" count as different words
        self.assertEqual(
            re.findall(pattern, "Hello how are you"), ["Hello", " how", " are", " you"]
        )

        # Letters, numbers and punctuation never end up in the same word
        self.assertEqual(
            re.findall(pattern, "Hello how123 are you!!!?"),
            ["Hello", " how", "123", " are", " you", "!!!?"],
        )

        # Only lowercase contractions are split off
        self.assertEqual(
            re.findall(pattern, "how're HOW'RE"), ["how", "'re", " HOW", "'", "RE"]
        )

        # Runs of whitespace are words of their own
        self.assertEqual(
            re.findall(pattern, "Hello   you  "), ["Hello", "  ", " you", "  "]
        )

    def test_gpt4_split_pattern(self):
        pattern = re.compile(GPT4_SPLIT_PATTERN)

        # Contractions are matched case-insensitively
        self.assertEqual(
            re.findall(pattern, "how're HOW'RE"), ["how", "'re", " HOW", "'RE"]
        )

        # Numbers are split into groups of at most 3 digits
        self.assertEqual(re.findall(pattern, "in 12345"), ["in", " ", "123", "45"])

        # Line breaks separate words
        self.assertEqual(re.findall(pattern, "Hello\nWorld"), ["Hello", "\n", "World"])


if __name__ == "__main__":
    unittest.main()
