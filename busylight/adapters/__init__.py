"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations of the domain ports: the light's REST endpoints,
    PNG swatch rendering and local settings storage.

Dependencies:
    Submodules depend on ``requests``, ``Pillow`` and filesystem APIs.

Call context:
    Imported by ``busylight.app`` for runtime wiring and by tests.
"""
