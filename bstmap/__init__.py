"""Ordered map on an unbalanced binary search tree, with a demo and a scored check runner."""

__version__ = "0.1.0"
__all__ = ["treemap", "demo", "grader"]