"""Explicit editor state, the actions that change it and the reducer.

The window never mutates state directly.  It builds an action, hands it to
:meth:`EditorSession.dispatch`, and the session first reduces the action
into a new :class:`EditorState` and then recomputes the processed image.
Keeping the two steps apart means the reducer stays a pure function that can
be tested without touching any pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Union

from PIL import Image

from ..errors import NoImageSelectedError
from .filters.catalog import DEFAULT_FILTER, create_filter
from .filters.descriptor import FilterDescriptor
from .pipeline import RenderContext, process

LOGGER = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "Please select an image before saving."


def _clamp_unit(value: float) -> float:
    """Return *value* limited to ``[0, 1]``."""

    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True)
class EditorState:
    """Inputs of the processed image: filter, slider values and source."""

    filter_name: str = DEFAULT_FILTER
    intensity: float = 0.5
    radius: float = 0.5
    source: Optional[Image.Image] = field(default=None, compare=False, repr=False)

    @property
    def has_source(self) -> bool:
        return self.source is not None


@dataclass(frozen=True)
class ImagePicked:
    image: Optional[Image.Image]


@dataclass(frozen=True)
class FilterSelected:
    identifier: str


@dataclass(frozen=True)
class IntensityChanged:
    value: float


@dataclass(frozen=True)
class RadiusChanged:
    value: float


Action = Union[ImagePicked, FilterSelected, IntensityChanged, RadiusChanged]


def reduce(state: EditorState, action: Action) -> EditorState:
    """Return the state that results from applying *action* to *state*.

    A cancelled pick (``ImagePicked(None)``) keeps the current source, so the
    same state object is returned and no recompute is needed.
    """

    if isinstance(action, ImagePicked):
        if action.image is None:
            return state
        return replace(state, source=action.image)
    if isinstance(action, FilterSelected):
        return replace(state, filter_name=action.identifier)
    if isinstance(action, IntensityChanged):
        return replace(state, intensity=_clamp_unit(action.value))
    if isinstance(action, RadiusChanged):
        return replace(state, radius=_clamp_unit(action.value))
    raise TypeError(f"Unsupported action: {action!r}")


ProcessedListener = Callable[[Image.Image], None]


class EditorSession:
    """Own the editor state and the cached processed image.

    All calls are expected on one thread (the GUI thread); each dispatch runs
    the filter synchronously before returning.
    """

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        context: Optional[RenderContext] = None,
    ) -> None:
        self._state = state or EditorState()
        self._context = context or RenderContext()
        self._filter: FilterDescriptor = create_filter(self._state.filter_name)
        self._processed: Optional[Image.Image] = None
        self._listeners: list[ProcessedListener] = []
        if self._state.has_source:
            self.recompute()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def current_filter(self) -> FilterDescriptor:
        return self._filter

    @property
    def processed(self) -> Optional[Image.Image]:
        """Return the last successfully rendered image, if any."""

        return self._processed

    def add_listener(self, listener: ProcessedListener) -> None:
        """Call *listener* with every newly rendered image."""

        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def dispatch(self, action: Action) -> Optional[Image.Image]:
        """Apply *action*, recompute, and return the current processed image."""

        new_state = reduce(self._state, action)
        if new_state is self._state:
            return self._processed
        if new_state.filter_name != self._state.filter_name:
            # Resolve first so an unknown identifier leaves the session untouched.
            self._filter = create_filter(new_state.filter_name)
        self._state = new_state
        return self.recompute()

    def recompute(self) -> Optional[Image.Image]:
        """Render the current state, keeping the previous image on failure."""

        state = self._state
        result = process(
            state.source,
            self._filter,
            state.intensity,
            state.radius,
            context=self._context,
        )
        if result is None:
            if state.has_source:
                LOGGER.info("%s produced no output; keeping previous preview", self._filter.name)
            return self._processed

        self._processed = result
        for listener in list(self._listeners):
            listener(result)
        return result

    def image_for_saving(self) -> Image.Image:
        """Return the processed image or raise :class:`NoImageSelectedError`."""

        if self._processed is None:
            raise NoImageSelectedError(NO_IMAGE_MESSAGE)
        return self._processed


__all__ = [
    "Action",
    "EditorSession",
    "EditorState",
    "FilterSelected",
    "ImagePicked",
    "IntensityChanged",
    "NO_IMAGE_MESSAGE",
    "RadiusChanged",
    "reduce",
]
