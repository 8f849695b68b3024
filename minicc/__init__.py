"""Scanner, syntax checker and token-table command for a small subset of C."""

__version__ = "0.1.0"
__all__ = ["cli", "parser", "scanner", "token"]