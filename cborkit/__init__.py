"""Append CBOR-encoded values to a byte buffer with cborkit.writer.Writer."""

__version__ = "0.1.0"
__all__ = ["writer"]