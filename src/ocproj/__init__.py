"""Switch between projects (namespaces) of the current cluster context."""

__version__ = "1.0.0"
