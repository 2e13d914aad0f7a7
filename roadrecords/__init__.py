"""Read, sort, search and update binary electronic-map road record files."""

__version__ = "0.1.0"

__all__ = ["cli", "record", "search", "sorting", "storage", "update"]