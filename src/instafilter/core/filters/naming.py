"""Turn internal filter identifiers into button labels."""

from __future__ import annotations

FILTER_PREFIX = "CI"


def strip_prefix(raw_name: str, prefix: str) -> str:
    """Return *raw_name* without a leading *prefix*, if present."""

    if prefix and raw_name.startswith(prefix):
        return raw_name[len(prefix):]
    return raw_name


def capital_indices(text: str) -> list[int]:
    """Return positions of uppercase characters after the first, highest first.

    The first character never counts as a word boundary.  Returning the
    indices in descending order lets callers insert separators without
    shifting the positions that are still pending.
    """

    indices = [index for index, character in enumerate(text) if index > 0 and character.isupper()]
    indices.reverse()
    return indices


def format_filter_name(raw_name: str, prefix: str = FILTER_PREFIX) -> str:
    """Return a readable label such as ``"Gaussian Blur"`` for ``"CIGaussianBlur"``.

    Runs of capitals are split letter by letter (``"CIRGBFilter"`` becomes
    ``"R G B Filter"``) because every interior uppercase character is treated
    as the start of a word.
    """

    name = strip_prefix(raw_name, prefix)
    for index in capital_indices(name):
        name = f"{name[:index]} {name[index:]}"
    return name


__all__ = ["FILTER_PREFIX", "capital_indices", "format_filter_name", "strip_prefix"]
