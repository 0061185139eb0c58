"""Run the selected filter over the source image and render the result."""

from __future__ import annotations

import logging
from typing import Optional

from PIL import Image

from ..errors import FilterEvaluationError
from .filters.descriptor import FilterDescriptor, INPUT_IMAGE_KEY
from .filters.parameters import apply_parameters

LOGGER = logging.getLogger(__name__)


class RenderContext:
    """Turn a filter's output into a standalone bitmap.

    Filters may hand back images that still share buffers with their input or
    use a mode the preview and the saver cannot consume directly.  The
    context detaches the pixels and normalises the mode to ``RGB``/``RGBA``.
    """

    def create_image(self, output: Image.Image) -> Optional[Image.Image]:
        width, height = output.size
        if width <= 0 or height <= 0:
            return None
        if output.mode in ("RGB", "RGBA"):
            return output.copy()
        if "A" in output.getbands():
            return output.convert("RGBA")
        return output.convert("RGB")


def process(
    source: Optional[Image.Image],
    filter_: FilterDescriptor,
    intensity: float,
    radius: float,
    *,
    context: Optional[RenderContext] = None,
) -> Optional[Image.Image]:
    """Return *source* filtered with the current parameters, or ``None``.

    ``None`` means "leave the display as it is": either no image has been
    picked yet, or the filter or the render step produced nothing.
    """

    if source is None:
        return None

    filter_.set_value(INPUT_IMAGE_KEY, source)
    apply_parameters(filter_, intensity, radius)

    try:
        output = filter_.output_image()
    except FilterEvaluationError as exc:
        LOGGER.debug("Filter evaluation failed: %s", exc)
        return None
    if output is None:
        return None

    rendered = (context or RenderContext()).create_image(output)
    if rendered is None:
        LOGGER.debug("Render context produced no image for %s", filter_.name)
    return rendered


__all__ = ["RenderContext", "process"]
