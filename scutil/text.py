"""Length-limited string helpers: create, append, trim, cut, replace, tokenize."""

from __future__ import annotations

from collections.abc import Iterator

# Largest length a string may reach (32-bit length minus header and terminator).
MAX_LENGTH = 2**32 - 1 - 4 - 1


def _check_length(length: int) -> None:
    if length > MAX_LENGTH:
        raise ValueError(f"string length {length} exceeds maximum {MAX_LENGTH}")


def create(value: str | None) -> str | None:
    """Return a copy of ``value``; ``None`` stays ``None``.

    Raises ValueError if the string is longer than MAX_LENGTH.
    """
    if value is None:
        return None
    _check_length(len(value))
    return str(value)


def append(value: str | None, suffix: str) -> str:
    """Return ``value`` followed by ``suffix``; a missing value starts fresh."""
    if value is None:
        result = create(suffix)
        if result is None:
            raise ValueError("cannot append None")
        return result
    if len(suffix) > MAX_LENGTH - len(value):
        raise ValueError("appended string would exceed maximum length")
    return value + suffix


def trim(value: str | None, chars: str) -> str | None:
    """Strip every character found in ``chars`` from both ends of ``value``."""
    if value is None:
        return None
    return value.strip(chars)


def substring(value: str | None, start: int, end: int) -> str:
    """Return ``value[start:end]``, raising ValueError on an invalid range."""
    if value is None:
        raise ValueError("cannot take a substring of None")
    length = len(value)
    if start < 0 or end < 0 or start > length or end > length or start > end:
        raise ValueError(
            f"invalid range [{start}, {end}) for string of length {length}"
        )
    return value[start:end]


def replace(value: str | None, old: str, new: str) -> str | None:
    """Replace every non-overlapping ``old`` with ``new``, left to right."""
    if value is None:
        return None
    if not old:
        raise ValueError("the string to replace must not be empty")
    _check_length(len(old))
    _check_length(len(new))
    count = value.count(old)
    if count == 0:
        return value
    _check_length(len(value) + count * (len(new) - len(old)))
    return value.replace(old, new)


def tokens(value: str | None, delimiters: str) -> Iterator[str]:
    """Yield the pieces of ``value`` between any of the ``delimiters``.

    Adjacent delimiters produce empty tokens, so ``n`` delimiters always
    yield ``n + 1`` tokens. Nothing is yielded for ``None``.
    """
    if value is None:
        return
    if not delimiters:
        yield value
        return
    first = delimiters[0]
    unified = value.translate({ord(ch): first for ch in delimiters})
    yield from unified.split(first)