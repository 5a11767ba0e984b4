"""Direction correction for railway line segments stored in a feature service."""

__all__ = [
    "core",
    "data",
    "correction",
    "service",
    "cli",
]
