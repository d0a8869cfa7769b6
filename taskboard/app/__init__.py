"""Application composition layer for the task screen.

``controller`` wires repository, use-cases, and view models without toolkit
imports; ``main`` and ``views`` hold the Tkinter desktop frontend.
"""
