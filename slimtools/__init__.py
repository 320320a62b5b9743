"""Status line generator, file filter and incremental menu matching."""

__version__ = "1.0.0"