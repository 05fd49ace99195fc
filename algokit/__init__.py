"""Classic algorithms over lists, strings, linked lists and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "counting",
    "dynamic",
    "hashing",
    "linkedlist",
    "searching",
    "text",
]