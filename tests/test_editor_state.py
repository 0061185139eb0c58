"""Tests for the editor reducer and the recomputing session."""

import pytest

from instafilter.core import editor_state
from instafilter.core.editor_state import (
    NO_IMAGE_MESSAGE,
    EditorSession,
    EditorState,
    FilterSelected,
    ImagePicked,
    IntensityChanged,
    RadiusChanged,
    reduce,
)
from instafilter.core.filters import create_filter
from instafilter.core.pipeline import process
from instafilter.errors import FilterNotFoundError, NoImageSelectedError


def test_defaults():
    state = EditorState()
    assert state.filter_name == "CISepiaTone"
    assert state.intensity == 0.5
    assert state.radius == 0.5
    assert not state.has_source


def test_slider_actions_are_clamped():
    state = reduce(EditorState(), IntensityChanged(1.5))
    state = reduce(state, RadiusChanged(-0.2))
    assert state.intensity == 1.0
    assert state.radius == 0.0


def test_cancelled_pick_keeps_state_object():
    state = EditorState()
    assert reduce(state, ImagePicked(None)) is state


def test_reducer_does_not_mutate_input(gradient_image):
    state = EditorState()
    new_state = reduce(state, ImagePicked(gradient_image))
    assert state.source is None
    assert new_state.source is gradient_image


def test_unknown_action_raises():
    with pytest.raises(TypeError):
        reduce(EditorState(), object())


def test_mutations_without_source_leave_output_absent():
    session = EditorSession()
    assert session.dispatch(IntensityChanged(0.2)) is None
    assert session.dispatch(FilterSelected("CIEdges")) is None
    assert session.processed is None


def test_pick_computes_processed_image(gradient_image):
    session = EditorSession()
    result = session.dispatch(ImagePicked(gradient_image))
    assert result is not None
    assert session.processed is result
    assert result.size == gradient_image.size


def test_every_slider_change_recomputes(gradient_image):
    session = EditorSession()
    session.dispatch(ImagePicked(gradient_image))
    first = session.processed
    session.dispatch(IntensityChanged(1.0))
    assert session.processed is not first
    assert session.processed.tobytes() != first.tobytes()


def test_filter_switch_renders_fresh_result(gradient_image):
    session = EditorSession()
    session.dispatch(ImagePicked(gradient_image))
    session.dispatch(FilterSelected("CIPixellate"))

    expected = process(gradient_image, create_filter("CIPixellate"), 0.5, 0.5)
    assert session.current_filter.name == "CIPixellate"
    assert session.processed.tobytes() == expected.tobytes()


def test_unknown_filter_leaves_session_untouched(gradient_image):
    session = EditorSession()
    session.dispatch(ImagePicked(gradient_image))
    before = session.state
    with pytest.raises(FilterNotFoundError):
        session.dispatch(FilterSelected("CINope"))
    assert session.state is before
    assert session.current_filter.name == "CISepiaTone"


def test_failed_render_keeps_previous_image(gradient_image, monkeypatch):
    session = EditorSession()
    session.dispatch(ImagePicked(gradient_image))
    previous = session.processed

    monkeypatch.setattr(editor_state, "process", lambda *args, **kwargs: None)
    assert session.dispatch(RadiusChanged(0.9)) is previous
    assert session.processed is previous
    assert session.state.radius == 0.9


def test_listeners_receive_each_render(gradient_image):
    session = EditorSession()
    received = []
    session.add_listener(received.append)
    session.dispatch(ImagePicked(gradient_image))
    session.dispatch(RadiusChanged(0.1))
    assert len(received) == 2
    assert received[-1] is session.processed


def test_session_with_initial_source_renders_immediately(gradient_image):
    session = EditorSession(EditorState(source=gradient_image))
    assert session.processed is not None


def test_saving_without_image_raises():
    session = EditorSession()
    with pytest.raises(NoImageSelectedError, match="Please select an image before saving"):
        session.image_for_saving()
    assert NO_IMAGE_MESSAGE == "Please select an image before saving."


def test_saving_returns_processed_image(gradient_image):
    session = EditorSession()
    session.dispatch(ImagePicked(gradient_image))
    assert session.image_for_saving() is session.processed
