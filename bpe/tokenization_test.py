import unittest

from bpe.tokenization import get_tokenizer, regex_tokenizer, simple_tokenizer


class TestTokenization(unittest.TestCase):
    def test_simple_tokenizer(self):
        self.assertEqual(
            simple_tokenizer("hello world el melodies"),
            ["hello", "world", "el", "melodies"],
        )

        # Spaces and line breaks are trimmed at both ends only
        self.assertEqual(simple_tokenizer("\r\n  the cat \n"), ["the", "cat"])
        self.assertEqual(simple_tokenizer("the\ncat"), ["the\ncat"])

        # There is no special handling of consecutive spaces or quotes
        self.assertEqual(simple_tokenizer("the  cat"), ["the", "", "cat"])
        self.assertEqual(simple_tokenizer('"the cat"'), ['"the', 'cat"'])

    def test_regex_tokenizer(self):
        tokenize = regex_tokenizer(r"\p{L}+")
        self.assertEqual(tokenize("Hello, world! 123"), ["Hello", "world"])
        self.assertEqual(tokenize(""), [])

    def test_get_tokenizer(self):
        self.assertIs(get_tokenizer("simple"), simple_tokenizer)
        self.assertEqual(
            get_tokenizer("gpt2")("Hello how're you"), ["Hello", " how", "'re", " you"]
        )
        self.assertEqual(
            get_tokenizer("gpt4")("Hello HOW'RE you"), ["Hello", " HOW", "'RE", " you"]
        )
        self.assertRaises(ValueError, get_tokenizer, "whitespace")


if __name__ == "__main__":
    unittest.main()
