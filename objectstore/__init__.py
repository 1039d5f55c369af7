"""Single-process in-memory object store with bucket/object addressing."""

__version__ = "0.1.0"
