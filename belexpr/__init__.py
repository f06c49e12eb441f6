"""Expression values, exact rational numbers, operators, tokens and parser errors for a small interpreted language."""

__version__ = "0.1.0"

__all__ = ["tokens", "errors", "values", "number", "operators"]