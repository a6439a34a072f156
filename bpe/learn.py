import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from bpe.corpus import Corpus
from bpe.pair import Pair
from bpe.pairs import indices_of
from bpe.statistics import Statistics, pair_stats, word_pairs


@dataclass(frozen=True)
class Encoder:
    """The result of training: everything needed to encode words later on.

    Attributes:
        pairs: the merged pairs in the order they were learned. Encoding must apply
            them in this order.
        replacements: maps each merged pair to the symbol that replaced it.
        max_symbol: the highest symbol id after training.
        corpus: the training corpus, whose words now hold the merged symbols.
    """

    pairs: tuple[Pair, ...]
    replacements: dict[Pair, int]
    max_symbol: int
    corpus: Corpus | None = field(default=None, compare=False, repr=False)


class ReplacedWord(NamedTuple):
    word_id: int
    frequency: int
    original: tuple[int, ...]
    replaced: tuple[int, ...]


def learn(
    corpus: Corpus,
    symbols: int,
    min_freq: int,
    mark_end_of_word: bool = True,
    log_every: int = 100,
) -> Encoder:
    """Learn up to `symbols` merges from the words of the corpus.

    Each iteration merges the most frequent pair into a new symbol. Only the words
    containing that pair are rewritten, and the statistics are repaired around the
    merged positions instead of being recounted.

    Args:
        corpus: the corpus to learn from. Its words are replaced in place.
        symbols: the maximum number of merges (new symbols) to learn.
        min_freq: training stops once the most frequent pair occurs fewer times.
        mark_end_of_word: whether a pair at the end of a word is told apart from the
            same pair elsewhere.
        log_every: log progress every this many merges.

    Returns:
        The learned encoder.
    """
    stats = pair_stats(corpus, mark_end_of_word)

    merges = []
    replacements = {}
    for i in range(symbols):
        # Also stop on an empty table or a non-positive count, even if min_freq <= 0:
        # a pair that no longer occurs is never merged
        if not stats.frequencies:
            logging.info(f"No pairs left to merge after {i} merges")
            break

        top_pair = mode(stats.frequencies)
        frequency = stats.frequencies[top_pair]
        if frequency < min_freq or frequency <= 0:
            logging.info(
                f"Stopping after {i} merges: the most frequent pair {top_pair:d} "
                f"occurs {frequency} times, below the minimum of {min_freq}"
            )
            break

        replaced = replace_pair(corpus, stats, top_pair)
        update_stats(stats, replaced, top_pair, mark_end_of_word)
        stats.tidy()

        logging.debug(
            f"Merged {top_pair:d} (frequency {frequency}, {len(replaced)} words) "
            f"into a new symbol {stats.max_symbol}"
        )
        replacements[top_pair] = stats.max_symbol
        merges.append(top_pair)

        if (i + 1) % log_every == 0:
            logging.info(
                f"Merges: {i + 1} | Last pair: {top_pair:d} | Frequency: {frequency} | "
                f"Pairs left: {len(stats.frequencies)}"
            )

    return Encoder(
        pairs=tuple(merges),
        replacements=replacements,
        max_symbol=stats.max_symbol,
        corpus=corpus,
    )


def mode(frequencies: dict[Pair, int]) -> Pair:
    """Get the most frequent pair. Ties go to the pair with the lowest `sort_key`
    so that the choice never depends on the iteration order of the dictionary.
    """
    return min(frequencies, key=lambda p: (-frequencies[p], p.sort_key))


def replace_pair(corpus: Corpus, stats: Statistics, pair: Pair) -> list[ReplacedWord]:
    """Merge the symbols of `pair` into a new symbol in every word containing it.

    Must be followed by `update_stats`, which uses the returned words to repair the
    statistics.
    """
    symbol = stats.max_symbol + 1
    occurrences = stats.indices.get(pair, {})

    replaced = []
    for word_id in sorted(occurrences):
        if occurrences[word_id] < 1:
            continue
        original = corpus.word(word_id)
        frequency = corpus.word_frequency(original)
        new_word = tuple(replace_in_sequence(original, pair, symbol))
        corpus.replace_word(word_id, new_word)
        replaced.append(ReplacedWord(word_id, frequency, original, new_word))
    return replaced


def update_stats(
    stats: Statistics,
    replaced: list[ReplacedWord],
    pair: Pair,
    mark_end_of_word: bool = True,
) -> None:
    """Repair the statistics after `replace_pair` merged `pair`.

    For every match of `pair` in a word, the matched pair and its neighbours on the
    left (prev) and on the right (next) disappear, and the pairs formed with the new
    symbol appear. Both sides are read off the words as they were before and after
    the merge, never off a half-updated word, so consecutive matches ("abab") are
    counted once. The boundary mark moves with the last pair of the word.
    """
    for word in replaced:
        old_pairs = word_pairs(word.original, mark_end_of_word)
        new_pairs = word_pairs(word.replaced, mark_end_of_word)
        matches = indices_of(pair, old_pairs)

        removed = set()
        added = set()
        for k, i in enumerate(matches):
            removed.update(j for j in (i - 1, i, i + 1) if 0 <= j < len(old_pairs))
            # Each earlier match shortened the word by one symbol
            position = i - k
            added.update(
                j for j in (position - 1, position) if 0 <= j < len(new_pairs)
            )

        changes = Counter()
        for j in removed:
            changes[old_pairs[j]] -= 1
        for j in added:
            changes[new_pairs[j]] += 1

        for p, count in changes.items():
            if count != 0:
                stats.add(p, word.word_id, count, word.frequency)

    stats.frequencies.pop(pair, None)
    stats.indices.pop(pair, None)
    stats.max_symbol += 1


def replace_in_sequence(word: Sequence[int], pair: Pair, symbol: int) -> list[int]:
    """Replace all occurrences of the symbols of `pair` in `word` with `symbol`,
    scanning from left to right. The end-of-word flag of `pair` is ignored.
    """
    new_word = []
    i = 0  # Index for iterating through the original word
    while i < len(word):
        # If we are NOT at the last position AND the pair matches, replace it
        if i < len(word) - 1 and word[i] == pair.first and word[i + 1] == pair.second:
            new_word.append(symbol)
            i += 2
        else:
            new_word.append(word[i])
            i += 1
    return new_word
