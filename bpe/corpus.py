from collections.abc import Iterable, Sequence


class Corpus:
    """In-memory store of distinct words and their frequencies.

    Each distinct word is kept once, as a tuple of symbols, under a stable integer id
    assigned in order of first occurrence. Training rewrites words in place through
    `replace_word`; the id and the frequency of a word never change.
    """

    def __init__(self, words: Iterable[Sequence[int]] = ()):
        self._words: list[tuple[int, ...]] = []
        self._frequencies: list[int] = []
        self._ids: dict[tuple[int, ...], int] = {}  # Map symbols to word id
        for word in words:
            self.add(word)

    @classmethod
    def from_words(cls, tokens: Iterable[str]) -> "Corpus":
        """Build a corpus from token strings, one symbol per unicode code point."""
        return cls([ord(ch) for ch in token] for token in tokens)

    def add(self, word: Sequence[int]) -> None:
        symbols = tuple(word)
        if not symbols:
            return
        word_id = self._ids.get(symbols)
        if word_id is None:
            self._ids[symbols] = len(self._words)
            self._words.append(symbols)
            self._frequencies.append(1)
        else:
            self._frequencies[word_id] += 1

    def size(self) -> int:
        return len(self._words)

    def __len__(self) -> int:
        return self.size()

    def word(self, word_id: int) -> tuple[int, ...]:
        if not 0 <= word_id < len(self._words):
            raise IndexError(f"Invalid word id: {word_id}")
        return self._words[word_id]

    def frequency(self, word_id: int) -> int:
        if not 0 <= word_id < len(self._words):
            raise IndexError(f"Invalid word id: {word_id}")
        return self._frequencies[word_id]

    def word_frequency(self, word: Sequence[int]) -> int:
        """Number of times the word occurs in the corpus, 0 if it is unknown."""
        word_id = self._ids.get(tuple(word))
        return 0 if word_id is None else self._frequencies[word_id]

    def replace_word(self, word_id: int, word: Sequence[int]) -> None:
        old = self.word(word_id)
        new = tuple(word)
        if new in self._ids and self._ids[new] != word_id:
            raise ValueError(f"Word {new} already exists with id {self._ids[new]}")
        del self._ids[old]
        self._ids[new] = word_id
        self._words[word_id] = new

    def text(self, word_id: int) -> str:
        """Decode a word back to a string. Symbols created by merges come out as
        whatever code point they happen to share.
        """
        return "".join(chr(symbol) for symbol in self.word(word_id))

    def __iter__(self):
        return iter(self._words)
