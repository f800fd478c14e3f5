"""Busy light control: keep a network busy light and its key icon in sync."""

__version__ = "0.1.0"
