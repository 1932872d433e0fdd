"""Console employee registry with role-based salary calculation."""

__version__ = "0.1.0"

__all__ = ["__version__"]