"""Adapter package for concrete port implementations.

Purpose:
    Collect implementations for domain ports (in-memory task storage and the
    local preferences file) used by use cases.

Dependencies:
    Submodules depend on the standard library, filesystem APIs, and domain
    protocol definitions only.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
