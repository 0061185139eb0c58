"""Tests wiring the main window to the editor session."""

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for GUI tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from PySide6.QtCore import QThreadPool

from instafilter.core.editor_state import EditorSession, EditorState
from instafilter.core.photo_library import PhotoLibrary
from instafilter.gui.main import initial_state
from instafilter.gui.ui.controllers import EditorController
from instafilter.gui.ui.main_window import MainWindow
from instafilter.gui.ui.qt_image import pil_to_qimage
from instafilter.gui.ui.widgets import dialogs
from instafilter.gui.ui.widgets.image_preview import PLACEHOLDER_TEXT
from instafilter.settings import Settings


@pytest.fixture
def alerts(monkeypatch):
    shown = []
    monkeypatch.setattr(
        dialogs,
        "show_information",
        lambda parent, message, **kwargs: shown.append((message, kwargs.get("informative_text"))),
    )
    return shown


@pytest.fixture
def editor(qapp, tmp_path, alerts):
    settings = Settings(tmp_path / "settings.json")
    library = PhotoLibrary(tmp_path / "Photos")
    window = MainWindow()
    session = EditorSession()
    pool = QThreadPool()
    controller = EditorController(
        window=window,
        session=session,
        settings=settings,
        library=library,
        thread_pool=pool,
    )
    yield controller, window, session, settings, library, pool
    pool.waitForDone()
    window.close()


def test_initial_view_state(editor):
    _controller, window, _session, _settings, _library, _pool = editor
    assert window.windowTitle() == "Instafilter"
    assert window.filter_button.text() == "Sepia Tone"
    assert window.save_button.text() == "Save"
    assert window.radius_slider.name() == "Radius"
    assert window.intensity_slider.name() == "Intensity"
    assert not window.preview.has_image()
    assert window.preview._label.text() == PLACEHOLDER_TEXT


def test_save_without_image_alerts_once_and_writes_nothing(editor, alerts):
    controller, _window, _session, _settings, library, _pool = editor

    assert controller.request_save() is False
    assert alerts == [("Please select an image", "Please select an image before saving.")]
    assert not library.root.exists()


def test_open_image_updates_preview_and_settings(editor, tmp_path, gradient_image):
    controller, window, session, settings, _library, _pool = editor
    path = tmp_path / "pick.png"
    gradient_image.save(path)

    assert controller.open_image(path) is True
    assert session.processed is not None
    assert window.preview.has_image()
    assert settings.get("picker.last_directory") == str(tmp_path)


def test_unreadable_pick_is_ignored(editor, tmp_path):
    controller, window, session, _settings, _library, _pool = editor
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"nope")
    assert controller.open_image(bad) is False
    assert session.processed is None
    assert not window.preview.has_image()


def test_slider_changes_dispatch_to_session(editor):
    _controller, window, session, _settings, _library, _pool = editor
    window.radius_slider.setValue(0.25)
    window.intensity_slider.setValue(0.75)
    assert session.state.radius == pytest.approx(0.25)
    assert session.state.intensity == pytest.approx(0.75)


def test_select_filter_updates_title_and_settings(editor):
    controller, window, session, settings, _library, _pool = editor
    controller.select_filter("CIGaussianBlur")
    assert session.current_filter.name == "CIGaussianBlur"
    assert window.filter_button.text() == "Gaussian Blur"
    assert settings.get("editor.filter") == "CIGaussianBlur"


def test_save_writes_processed_image(editor, tmp_path, gradient_image, alerts):
    controller, _window, _session, _settings, library, pool = editor
    path = tmp_path / "pick.png"
    gradient_image.save(path)
    controller.open_image(path)

    assert controller.request_save() is True
    pool.waitForDone()
    assert alerts == []
    assert (library.root / "IMG_0001.png").exists()


def test_initial_state_sanitises_stored_values(tmp_path):
    settings = Settings(tmp_path / "settings.json")
    settings.set("editor.filter", "CIUnknown")
    settings.set("editor.intensity", "loud")
    settings.set("editor.radius", 4)
    state = initial_state(settings)
    assert state == EditorState(filter_name="CISepiaTone", intensity=0.5, radius=1.0)


def test_pil_to_qimage_keeps_dimensions(qapp, gradient_image):
    qimage = pil_to_qimage(gradient_image)
    assert (qimage.width(), qimage.height()) == gradient_image.size


def test_pick_renders_when_settings_cannot_be_written(qapp, tmp_path, gradient_image, alerts):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    settings = Settings(blocker / "settings.json")
    window = MainWindow()
    session = EditorSession()
    controller = EditorController(
        window=window,
        session=session,
        settings=settings,
        library=PhotoLibrary(tmp_path / "Photos"),
        thread_pool=QThreadPool(),
    )
    path = tmp_path / "pick.png"
    gradient_image.save(path)

    assert controller.open_image(path) is True
    assert window.preview.has_image()
    controller.select_filter("CIEdges")
    assert window.filter_button.text() == "Edges"
    assert settings.get("picker.last_directory") == str(tmp_path)
    window.close()
