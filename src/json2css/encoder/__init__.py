"""CSS encoder: stylesheet tree to bytes."""

from json2css.encoder.encode import Encoder, encode, encode_to
from json2css.encoder.writer import TokenWriter

__all__ = ["Encoder", "TokenWriter", "encode", "encode_to"]
