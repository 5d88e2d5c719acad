"""Parcel records, SQLite storage and a tracking service with a demo command."""

__version__ = "0.1.0"
__all__ = ["models", "store", "service"]