"""Shell built-in commands, an ordered environment table, a buffered line reader and a C-style formatter."""

__version__ = "0.1.0"