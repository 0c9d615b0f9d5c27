"""Bounded stacks, queues and deques with text menus, sorting and recursion drills, and small object models."""

__version__ = "0.1.0"