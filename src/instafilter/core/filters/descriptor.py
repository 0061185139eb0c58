"""Configurable filter objects modelled after Core Image's ``CIFilter``.

A descriptor owns a small key/value store of inputs.  Callers discover which
inputs a filter understands through :attr:`FilterDescriptor.input_keys`
rather than hardcoding per-filter knowledge, then request the result through
:meth:`FilterDescriptor.output_image`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional

from PIL import Image

from ...errors import FilterEvaluationError

INPUT_IMAGE_KEY = "image"
INPUT_INTENSITY_KEY = "intensity"
INPUT_RADIUS_KEY = "radius"
INPUT_SCALE_KEY = "scale"


class FilterDescriptor(ABC):
    """Base class for every built-in filter."""

    name: ClassVar[str] = ""
    """Internal identifier, e.g. ``"CIGaussianBlur"``."""

    defaults: ClassVar[Mapping[str, float]] = {}
    """Numeric inputs accepted by the filter together with their defaults."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = dict(self.defaults)
        self._values[INPUT_IMAGE_KEY] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @property
    def input_keys(self) -> frozenset[str]:
        """Return every input name this filter accepts, including the image."""

        return frozenset(self._values)

    def set_value(self, key: str, value: Any) -> None:
        if key not in self._values:
            raise ValueError(f"{self.name} does not accept input {key!r}")
        if key != INPUT_IMAGE_KEY:
            value = float(value)
        self._values[key] = value

    def value(self, key: str) -> Any:
        return self._values[key]

    def output_image(self) -> Optional[Image.Image]:
        """Return the filtered image or ``None`` when no input image is set.

        Errors raised by Pillow or numpy while rendering are wrapped in
        :class:`FilterEvaluationError` so the pipeline can treat every failure
        uniformly.
        """

        image = self._values[INPUT_IMAGE_KEY]
        if image is None:
            return None
        try:
            return self._render(image)
        except (ValueError, OSError, MemoryError) as exc:
            raise FilterEvaluationError(f"{self.name} failed: {exc}") from exc

    @abstractmethod
    def _render(self, image: Image.Image) -> Image.Image:
        """Apply the filter to *image* using the current input values."""


__all__ = [
    "FilterDescriptor",
    "INPUT_IMAGE_KEY",
    "INPUT_INTENSITY_KEY",
    "INPUT_RADIUS_KEY",
    "INPUT_SCALE_KEY",
]
