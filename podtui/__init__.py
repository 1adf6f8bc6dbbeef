"""Screen-independent theme, info bar and dialog models for a Podman terminal interface."""

__version__ = "0.1.0"

__all__ = [
    "df",
    "history",
    "infobar",
    "netcreate",
    "search",
    "style",
    "utils",
    "volcreate",
]