"""Typed booking records and loaders that read DB-API result sets into them."""

__version__ = "0.1.0"
__all__ = ["models", "recordset"]