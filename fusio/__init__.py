"""Async read/write interfaces over owned buffers, a binary codec and CRC-32 checksummed streams."""

__version__ = "0.3.8"

__all__ = ["buf", "codec", "codec_collections", "errors", "hash", "io"]