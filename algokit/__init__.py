"""Classic algorithms on binary trees, search trees, linked lists, arrays and dynamic programming problems."""

__version__ = "0.1.0"