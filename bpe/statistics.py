from dataclasses import dataclass, field

from bpe.corpus import Corpus
from bpe.pair import Pair
from bpe.pairs import pairs


@dataclass
class Statistics:
    """Pair statistics of a corpus, used to figure out which pair to merge next.

    Attributes:
        frequencies: maps each pair to the number of times it occurs in the corpus,
            i.e. the sum over the words containing it of word frequency times the
            number of occurrences in the word.
        indices: maps each pair to {word id: number of occurrences in the word}.
        max_symbol: the highest symbol id in use by any word, including words too
            short to have pairs. The next merge creates the symbol `max_symbol + 1`.
    """

    frequencies: dict[Pair, int] = field(default_factory=dict)
    indices: dict[Pair, dict[int, int]] = field(default_factory=dict)
    max_symbol: int = 0

    def add(self, pair: Pair, word_id: int, count: int, frequency: int) -> None:
        """Record `count` more occurrences (fewer if negative) of `pair` in a word."""
        self.frequencies[pair] = self.frequencies.get(pair, 0) + count * frequency

        occurrences = self.indices.setdefault(pair, {})
        total = occurrences.get(word_id, 0) + count
        if total > 0:
            occurrences[word_id] = total
        else:
            occurrences.pop(word_id, None)

    def tidy(self) -> None:
        tidy_frequencies(self.frequencies)
        tidy_indices(self.indices)


def word_pairs(
    word: tuple[int, ...], mark_end_of_word: bool = True, buf: list[Pair] | None = None
) -> list[Pair]:
    """Pairs of a word as they are keyed in the statistics: the last pair is
    boundary-marked unless `mark_end_of_word` is False.
    """
    ps = pairs(word, buf)
    if mark_end_of_word and ps:
        ps[-1] = ps[-1].marked()
    return ps


def pair_stats(
    corpus: Corpus, mark_end_of_word: bool = True, buf: list[Pair] | None = None
) -> Statistics:
    """Count the pairs of every word in the corpus and index them by word id.

    Args:
        corpus: the corpus to scan.
        mark_end_of_word: whether the last pair of each word is boundary-marked.
        buf: optional list of pairs reused for every word.

    Returns:
        The statistics of the corpus.
    """
    buf = [] if buf is None else buf
    stats = Statistics()
    for word_id in range(corpus.size()):
        word = corpus.word(word_id)
        frequency = corpus.word_frequency(word)
        # Single-symbol words have no pairs but their symbol is still in use
        stats.max_symbol = max(stats.max_symbol, *word)
        for pair in word_pairs(word, mark_end_of_word, buf):
            stats.add(pair, word_id, 1, frequency)
    return stats


def tidy_frequencies(frequencies: dict[Pair, int]) -> None:
    """Remove the pairs that no longer occur in the corpus."""
    stale = [pair for pair, frequency in frequencies.items() if frequency <= 0]
    for pair in stale:
        del frequencies[pair]


def tidy_indices(indices: dict[Pair, dict[int, int]]) -> None:
    """Remove the pairs that are no longer found in any word."""
    stale = [pair for pair, occurrences in indices.items() if not occurrences]
    for pair in stale:
        del indices[pair]
