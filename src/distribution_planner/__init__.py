"""Cost-aware distribution planning for perishable goods."""

__version__ = "0.1.0"
