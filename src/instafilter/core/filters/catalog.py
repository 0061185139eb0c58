"""Registry of the built-in filters and the fixed menu of choices."""

from __future__ import annotations

from typing import NamedTuple

from ...errors import FilterNotFoundError
from .builtin import BUILTIN_FILTERS
from .descriptor import FilterDescriptor


class FilterChoice(NamedTuple):
    """One entry of the filter selection menu."""

    title: str
    identifier: str


FILTER_CHOICES: tuple[FilterChoice, ...] = (
    FilterChoice("Crystallize", "CICrystallize"),
    FilterChoice("Edges", "CIEdges"),
    FilterChoice("Gaussian Blur", "CIGaussianBlur"),
    FilterChoice("Pixellate", "CIPixellate"),
    FilterChoice("Sepia Tone", "CISepiaTone"),
    FilterChoice("Unsharp Mask", "CIUnsharpMask"),
    FilterChoice("Vignette", "CIVignette"),
)

DEFAULT_FILTER = "CISepiaTone"

_REGISTRY: dict[str, type[FilterDescriptor]] = {cls.name: cls for cls in BUILTIN_FILTERS}


def available_filters() -> tuple[str, ...]:
    """Return every registered filter identifier."""

    return tuple(_REGISTRY)


def create_filter(identifier: str) -> FilterDescriptor:
    """Instantiate the filter registered under *identifier*."""

    try:
        factory = _REGISTRY[identifier]
    except KeyError:
        raise FilterNotFoundError(f"Unknown filter: {identifier}") from None
    return factory()


__all__ = [
    "DEFAULT_FILTER",
    "FILTER_CHOICES",
    "FilterChoice",
    "available_filters",
    "create_filter",
]
