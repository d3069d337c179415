"""Chunked file storage spread across device volumes."""

__version__ = "0.1.0"
__all__ = ["chunk", "device", "volume", "xfile"]