"""NiceGUI web runtime for the task manager."""
