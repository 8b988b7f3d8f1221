"""Classic data structures and algorithms: sorts, array and string routines,
postfix evaluation, a binary search tree, linked lists, stacks and queues."""

__version__ = "0.1.0"

__all__ = ["__version__"]