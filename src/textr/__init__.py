"""textr: classic Unix text filters as streaming line transformers."""

__all__ = ["__version__"]

__version__ = "0.1.0"
