"""Controllers coordinating the editor window."""

from .editor_controller import EditorController

__all__ = ["EditorController"]
