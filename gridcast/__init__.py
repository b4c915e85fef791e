"""Grid ray-casting first-person renderer."""

__version__ = "0.1.0"
