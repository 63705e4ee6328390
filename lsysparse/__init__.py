"""Define, validate and expand Lindenmayer (L-)systems."""

__version__ = "1.0.0"
__all__ = ["__version__"]