"""Window-system integration helpers: DRM formats, buffer allocation planning, present modes and small utilities."""

__version__ = "0.1.0"