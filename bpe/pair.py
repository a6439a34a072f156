from typing import NamedTuple


class Pair(NamedTuple):
    """An ordered pair of adjacent symbols, the unit of merge candidacy.

    A pair that sits at the end of a word is stored with `word_end=True`. Such a
    boundary-marked pair covers the same two symbols as its unmarked counterpart
    but is a different key in the frequency table and in the index, e.g. the 'e' at
    the end of "the" is counted apart from the 'e' in "then".

    When displayed or serialized, a boundary-marked pair shows its second symbol
    negated: Pair(104, 101, word_end=True) prints as (h -e).
    """

    first: int
    second: int
    word_end: bool = False

    @property
    def signed_second(self) -> int:
        return -self.second if self.word_end else self.second

    @property
    def sort_key(self) -> tuple[int, int, bool]:
        """Total order used to break frequency ties: lower `first` wins, then lower
        signed `second` (so a marked pair comes before its unmarked counterpart).
        The last element only matters for the symbol 0, whose negation is itself.
        """
        return self.first, self.signed_second, not self.word_end

    def marked(self) -> "Pair":
        return Pair(self.first, self.second, word_end=True)

    def unmarked(self) -> "Pair":
        return Pair(self.first, self.second)

    def __format__(self, format_spec: str) -> str:
        if format_spec == "d":
            return f"({self.first} {self.signed_second})"
        first, second = chr(self.first), chr(self.second)
        if format_spec == "q":
            first, second = repr(first), repr(second)
        sign = "-" if self.word_end else ""
        return f"({first} {sign}{second})"

    def __str__(self) -> str:
        return format(self)
