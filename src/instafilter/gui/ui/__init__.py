"""Widgets, controllers and background tasks for the main window."""
