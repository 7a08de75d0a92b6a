"""Sort integers with two stacks and a fixed set of push, swap and rotate operations."""

__version__ = "0.1.0"