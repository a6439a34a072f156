from collections.abc import Callable

import regex as re

from bpe.split_patterns import GPT2_SPLIT_PATTERN, GPT4_SPLIT_PATTERN

Tokenizer = Callable[[str], list[str]]


def simple_tokenizer(text: str) -> list[str]:
    """Split text on single spaces after trimming spaces and line breaks at both
    ends. There is no quoting and no locale handling: two consecutive spaces give
    an empty token.
    """
    return text.strip("\r\n ").split(" ")


def regex_tokenizer(pattern: str) -> Tokenizer:
    """Create a tokenizer that returns every match of `pattern` in the text."""
    compiled_pattern = re.compile(pattern)

    def tokenize(text: str) -> list[str]:
        return re.findall(compiled_pattern, text)

    return tokenize


def get_tokenizer(name: str) -> Tokenizer:
    if name == "simple":
        return simple_tokenizer
    elif name == "gpt2":
        return regex_tokenizer(GPT2_SPLIT_PATTERN)
    elif name == "gpt4":
        return regex_tokenizer(GPT4_SPLIT_PATTERN)
    else:
        raise ValueError(f"Tokenizer {name} is not recognized!")
