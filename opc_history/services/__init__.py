"""Service layer."""

from opc_history.services.codec import (
    WireCodec,
    codec,
    decode_read_events_details,
    encode_read_events_details,
)

__all__ = [
    "WireCodec",
    "codec",
    "decode_read_events_details",
    "encode_read_events_details",
]
