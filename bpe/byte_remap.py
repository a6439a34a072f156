"""Reversible mapping between raw bytes and printable symbols.

Training at byte level needs a symbol for each of the 256 byte values. Mapping the
bytes to themselves would put whitespace and control characters into the vocabulary,
so, following GPT-2, the printable bytes keep their own code point and every other
byte is moved to a code point above 255.
"""

# Byte values that are printable characters in Latin-1: '!' to '~', '¡' to '¬' and
# '®' to 'ÿ'. The soft hyphen (173) is left out.
PRINTABLE_RANGES = (range(33, 127), range(161, 173), range(174, 256))


def bytes_to_symbols() -> dict[int, int]:
    """Map every byte value 0, ..., 255 to a printable code point.

    Printable bytes map to themselves. The remaining bytes, in increasing order, map
    to 256, 257, ... For example, the space (32) maps to 288 ('Ġ').
    """
    table = {b: b for r in PRINTABLE_RANGES for b in r}
    n = 0
    for b in range(256):
        if b not in table:
            table[b] = 256 + n
            n += 1
    return table


def symbols_to_bytes() -> dict[int, int]:
    return {symbol: b for b, symbol in bytes_to_symbols().items()}


_BYTE_TO_SYMBOL = bytes_to_symbols()
_SYMBOL_TO_BYTE = symbols_to_bytes()


def remap_bytes(text: str) -> str:
    """Encode the text with UTF-8 and spell each byte with its printable symbol."""
    return "".join(chr(_BYTE_TO_SYMBOL[b]) for b in text.encode("utf-8"))


def restore_bytes(text: str) -> str:
    """Inverse of `remap_bytes`."""
    raw = bytes(_SYMBOL_TO_BYTE[ord(ch)] for ch in text)
    return raw.decode("utf-8", errors="replace")
