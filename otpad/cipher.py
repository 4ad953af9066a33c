"""One-time pad arithmetic over the 27-symbol alphabet of capitals and space."""

from itertools import zip_longest

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ "
_INDEX = {symbol: position for position, symbol in enumerate(ALPHABET)}
_ALLOWED = frozenset(ALPHABET + "\n")


def _pairs(message, key):
    """Pair each message character with its key character ("" past the key's end)."""
    return zip_longest(message, key[: len(message)], fillvalue="")


def encrypt(message, key):
    """Encrypt ``message`` with ``key``; newlines pass through unchanged.

    A character outside the alphabet counts as position 0, as does a
    missing key character.
    """
    out = []
    for char, key_char in _pairs(message, key):
        if char == "\n":
            out.append(char)
            continue
        total = _INDEX.get(char, 0) + _INDEX.get(key_char, 0)
        out.append(ALPHABET[total % len(ALPHABET)])
    return "".join(out)


def decrypt(message, key):
    """Decrypt ``message`` with ``key``; newlines pass through unchanged.

    Where either the message or the key character is outside the alphabet,
    the message character is copied as it is.
    """
    out = []
    for char, key_char in _pairs(message, key):
        if char == "\n":
            out.append(char)
            continue
        cipher_index = _INDEX.get(char)
        key_index = _INDEX.get(key_char)
        if cipher_index is None or key_index is None:
            out.append(char)
        else:
            out.append(ALPHABET[(cipher_index - key_index) % len(ALPHABET)])
    return "".join(out)


def validate_text(text):
    """Return True if ``text`` holds only capitals, spaces and newlines."""
    return all(char in _ALLOWED for char in text)