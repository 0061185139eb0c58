"""Map the two normalised slider values onto a filter's native inputs."""

from __future__ import annotations

from .descriptor import (
    FilterDescriptor,
    INPUT_INTENSITY_KEY,
    INPUT_RADIUS_KEY,
    INPUT_SCALE_KEY,
)

RADIUS_RANGE = 200.0
SCALE_RANGE = 100.0


def parameter_assignments(
    input_keys: frozenset[str] | set[str], intensity: float, radius: float
) -> dict[str, float]:
    """Return the values a filter accepting *input_keys* should receive.

    Intensity passes through unchanged, radius is scaled to ``[0, 200]`` and
    the scale input is driven by the intensity slider over ``[0, 100]``.
    Inputs the filter does not accept are simply left out.
    """

    assignments: dict[str, float] = {}
    if INPUT_INTENSITY_KEY in input_keys:
        assignments[INPUT_INTENSITY_KEY] = intensity
    if INPUT_RADIUS_KEY in input_keys:
        assignments[INPUT_RADIUS_KEY] = radius * RADIUS_RANGE
    if INPUT_SCALE_KEY in input_keys:
        assignments[INPUT_SCALE_KEY] = intensity * SCALE_RANGE
    return assignments


def apply_parameters(filter_: FilterDescriptor, intensity: float, radius: float) -> dict[str, float]:
    """Write the mapped values onto *filter_* and return what was assigned."""

    assignments = parameter_assignments(filter_.input_keys, intensity, radius)
    for key, value in assignments.items():
        filter_.set_value(key, value)
    return assignments


__all__ = ["RADIUS_RANGE", "SCALE_RANGE", "apply_parameters", "parameter_assignments"]
