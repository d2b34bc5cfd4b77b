"""A buffer that pulls items from an iterator only as they are needed."""

__version__ = "0.1.0"
__all__ = ["lazy_buffer"]