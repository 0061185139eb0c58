"""Background worker helpers for GUI tasks."""

from .image_save_worker import ImageSaveSignals, ImageSaveWorker

__all__ = ["ImageSaveSignals", "ImageSaveWorker"]
