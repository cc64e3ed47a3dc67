"""Character, memory and string helpers, text output, a linked list, a printf subset, RGBA pixel buffers and depth-sorted draw calls."""

__version__ = "0.1.0"