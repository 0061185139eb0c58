"""Custom widgets used by the editor window."""

from .image_preview import ImagePreview
from .parameter_slider import ParameterSlider

__all__ = ["ImagePreview", "ParameterSlider"]
