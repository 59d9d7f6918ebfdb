"""Recipe ingredient parsing, knowledge base matching and shopping list aggregation."""

__version__ = "0.1.0"
