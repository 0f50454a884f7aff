"""Codec module - value <-> text encoders for cache storage"""

from .json_codec import JsonCodec

__all__ = ["JsonCodec"]
