"""ASCII character, byte-buffer, NUL-terminated string, number conversion, file-descriptor output and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["ctype", "memory", "strings", "convert", "transform", "output", "linkedlist"]