"""Decoding of the bincode binary format: configuration, readers and decoders."""

__version__ = "0.1.0"
__all__ = ["composites", "config", "decoder", "enums", "errors", "integers", "read", "records"]