"""Enumerate the adjacent pairs of a word."""

from collections.abc import Sequence

from bpe.pair import Pair


def pairs(symbols: Sequence[int], buf: list[Pair] | None = None) -> list[Pair]:
    """Return the pairs of consecutive symbols in a word, from left to right.

    A word of n symbols has n - 1 pairs, so words with fewer than 2 symbols give an
    empty list.

    Args:
        symbols: the symbol sequence of the word.
        buf: an optional list to reuse across calls. It is cleared, filled with the
            pairs and returned, which avoids allocating a new list for every word of
            a large corpus.

    Returns:
        The list of pairs (`buf` itself if it was given).
    """
    buf = [] if buf is None else buf
    buf.clear()
    for first, second in zip(symbols, symbols[1:]):  # Iterate consecutive symbols
        buf.append(Pair(first, second))
    return buf


def pairs_of_text(word: str, buf: list[Pair] | None = None) -> list[Pair]:
    """Same as `pairs`, for a word given as a string of unicode code points."""
    return pairs([ord(ch) for ch in word], buf)


def indices_of(pair: Pair, ps: Sequence[Pair]) -> list[int]:
    """Find the positions at which the symbols of `pair` occur in a list of pairs.

    Occurrences overlapping the previous match are skipped: in "aaa" the pair
    ('a', 'a') is found at position 0 only, because a left-to-right merge consumes
    the middle 'a'. The end-of-word flag of `pair` is ignored.
    """
    positions = []
    for i, p in enumerate(ps):
        if p.first != pair.first or p.second != pair.second:
            continue
        if positions and i == positions[-1] + 1:
            continue
        positions.append(i)
    return positions
