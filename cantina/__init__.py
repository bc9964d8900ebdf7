"""Canteen point-of-sale: catalog, students, sales, restock list and menu."""

__version__ = "0.1.0"

__all__ = ["catalog", "cli", "restock", "sales", "students"]