"""In-memory key-value store with typed values, lists, hashes and expiry."""

__version__ = "0.1.0"

__all__ = ["demo", "store", "utils", "values"]