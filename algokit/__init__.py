"""Classic algorithm and data-structure solutions: linked lists, trees, arrays, strings, graphs and small designs."""

__version__ = "0.1.0"