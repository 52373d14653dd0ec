"""Lexer, syntax checks, pipe splitting and command types for a small shell."""

__version__ = "0.1.0"
__all__ = ["syntax", "tokens", "types", "utils"]