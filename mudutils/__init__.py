"""Everyday helpers: sequences, byte sizes, errors, value checks, random picks,
async timing control, environment probing and logging."""

__version__ = "1.0.0"

__all__ = [
    "array",
    "async_utils",
    "bytes",
    "env",
    "error",
    "function",
    "lang",
    "logger",
    "math",
]