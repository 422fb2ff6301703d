"""Typed binary serialization of integers, floats, strings and nested vectors."""

__version__ = "0.1.0"
__all__ = ["bufferstream", "datatypes", "serializator"]