"""Heaps, a linked list, a queue, a stack, list and tree nodes, and small helpers."""

__version__ = "0.1.0"
__all__ = ["containers", "heaps", "linkedlist", "nodes", "utils"]