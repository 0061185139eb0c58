"""Core editing logic independent of the Qt user interface."""
