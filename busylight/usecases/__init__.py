"""Use-case layer for the reconciliation flows.

Each module coordinates domain policies and ports without performing
transport I/O directly.
"""
