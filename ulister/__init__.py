"""List directory contents in columns, streams or long format."""

__version__ = "0.1.0"
__all__ = ["__version__"]