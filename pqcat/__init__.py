"""Classical attacks on code-based cryptosystems."""

__version__ = "0.1.0"