"""Tkinter views (UI-only; all intents leave through injected callbacks)."""
