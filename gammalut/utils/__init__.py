"""
Gamma table utilities package.
Internal utilities - not part of public API.
"""

__all__ = [
    "formatters",
    "parsers",
    "validators",
    "visualization",
]
