"""Browse and manage files in named filesystem namespaces over HTTP."""

__version__ = "1.0.0"
