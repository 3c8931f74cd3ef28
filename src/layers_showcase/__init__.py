"""layers-showcase: a strictly layered User pipeline."""

__version__ = "0.1.0"
