"""Household finances: families, members, bank accounts and net worth in SQLite."""

__version__ = "0.1.0"

__all__ = ["__version__"]