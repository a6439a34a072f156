"""Read and write learned encoders as JSON."""

import json
import pathlib
from typing import Any

from bpe.learn import Encoder
from bpe.pair import Pair


def pair_to_dict(pair: Pair) -> dict[str, Any]:
    """Serialize a pair as {"first": ..., "second": ...}. A boundary-marked pair
    stores its second symbol negated. The symbol 0 cannot be negated, so in that one
    case the flag is written out as "word_end".
    """
    record: dict[str, Any] = {"first": pair.first, "second": pair.signed_second}
    if pair.word_end and pair.second == 0:
        record["word_end"] = True
    return record


def pair_from_dict(record: Any) -> Pair:
    if not isinstance(record, dict):
        raise ValueError(f"Expected a pair record, got {record!r}")
    first = _get_int(record, "first")
    second = _get_int(record, "second")
    word_end = record.get("word_end", False)
    if not isinstance(word_end, bool):
        raise ValueError(f"Invalid word_end flag in pair record {record!r}")
    if first < 0:
        raise ValueError(f"Invalid first symbol in pair record {record!r}")
    if second < 0:
        return Pair(first, -second, word_end=True)
    return Pair(first, second, word_end=word_end)


def encoder_to_dict(encoder: Encoder) -> dict[str, Any]:
    return {
        "pairs": [pair_to_dict(p) for p in encoder.pairs],
        "replacements": [
            {"pair": pair_to_dict(p), "symbol": symbol}
            for p, symbol in encoder.replacements.items()
        ],
        "max_symbol": encoder.max_symbol,
    }


def encoder_from_dict(record: Any) -> Encoder:
    """Rebuild an encoder from `encoder_to_dict` output. The encoder is not tied to
    any corpus. Raises ValueError if the record is malformed.
    """
    if not isinstance(record, dict):
        raise ValueError(f"Expected an encoder record, got {type(record).__name__}")
    for key in ("pairs", "replacements"):
        if not isinstance(record.get(key), list):
            raise ValueError(f"Encoder record must have a list of {key}")

    pairs = tuple(pair_from_dict(p) for p in record["pairs"])
    replacements = {}
    for entry in record["replacements"]:
        if not isinstance(entry, dict) or "pair" not in entry:
            raise ValueError(f"Invalid replacement entry {entry!r}")
        replacements[pair_from_dict(entry["pair"])] = _get_int(entry, "symbol")

    return Encoder(
        pairs=pairs,
        replacements=replacements,
        max_symbol=_get_int(record, "max_symbol"),
    )


def save_encoder(encoder: Encoder, path: str | pathlib.Path) -> None:
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(encoder_to_dict(encoder), f, indent=2)


def load_encoder(path: str | pathlib.Path) -> Encoder:
    with open(path, "r", encoding="utf-8") as f:
        try:
            record = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Could not parse encoder file {path}: {e}") from e
    return encoder_from_dict(record)


def _get_int(record: dict, key: str) -> int:
    value = record.get(key)
    # bool is a subclass of int but is never a valid symbol
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Expected an integer {key!r} in {record!r}")
    return value
