"""Taskboard: single-screen task manager (MVVM + ports)."""

__version__ = "0.1.0"
