"""Built-in image filters and the helpers that configure them.

The package is split by concern:
- descriptor: the configurable filter base class and input key names
- builtin: Pillow/numpy implementations of each filter
- catalog: identifier registry and the fixed list of menu choices
- parameters: slider-to-input mapping
- naming: identifier-to-label formatting
"""

from __future__ import annotations

from .catalog import DEFAULT_FILTER, FILTER_CHOICES, FilterChoice, available_filters, create_filter
from .descriptor import (
    FilterDescriptor,
    INPUT_IMAGE_KEY,
    INPUT_INTENSITY_KEY,
    INPUT_RADIUS_KEY,
    INPUT_SCALE_KEY,
)
from .naming import FILTER_PREFIX, format_filter_name
from .parameters import apply_parameters, parameter_assignments

__all__ = [
    "DEFAULT_FILTER",
    "FILTER_CHOICES",
    "FILTER_PREFIX",
    "FilterChoice",
    "FilterDescriptor",
    "INPUT_IMAGE_KEY",
    "INPUT_INTENSITY_KEY",
    "INPUT_RADIUS_KEY",
    "INPUT_SCALE_KEY",
    "apply_parameters",
    "available_filters",
    "create_filter",
    "format_filter_name",
    "parameter_assignments",
]
