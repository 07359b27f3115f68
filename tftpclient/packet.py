"""Fixed-size TFTP packets as exchanged with the transfer server."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum


class Opcode(IntEnum):
    """Operation codes carried in the first field of every packet."""

    RRQ = 1
    WRQ = 2
    DATA = 3
    ACK = 4
    ERROR = 5


FILENAME_SIZE = 256
MODE_SIZE = 8
DATA_SIZE = 512
MESSAGE_SIZE = 512

# Every packet occupies the same number of bytes: a 16-bit opcode, two bytes
# of alignment padding, then a body laid out according to the opcode.
_REQUEST = struct.Struct(f"<H2x{FILENAME_SIZE}s{MODE_SIZE}s256x")
_DATA = struct.Struct(f"<H2xH2xi{DATA_SIZE}s")
_ACK = struct.Struct("<H2xH518x")
_ERROR = struct.Struct(f"<H2xH{MESSAGE_SIZE}s6x")
_OPCODE = struct.Struct("<H")

PACKET_SIZE = _REQUEST.size


def _check_u16(value: int, name: str) -> int:
    value = int(value)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name} must fit in 16 bits, got {value}")
    return value


def _encode_text(text: str, limit: int, name: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) > limit:
        raise ValueError(f"{name} is longer than {limit} bytes")
    return raw


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Packet:
    """A TFTP packet; which fields go on the wire depends on the opcode."""

    opcode: int = 0
    filename: str = ""
    mode: str = ""
    block_number: int = 0
    data: bytes = b""
    error_code: int = 0
    error_msg: str = ""

    @property
    def size(self) -> int:
        """Number of payload bytes in a DATA packet."""
        return len(self.data)

    def encode(self) -> bytes:
        """Serialise the packet into its fixed-size wire form."""
        opcode = _check_u16(self.opcode, "opcode")
        if opcode in (Opcode.RRQ, Opcode.WRQ):
            return _REQUEST.pack(
                opcode,
                _encode_text(self.filename, FILENAME_SIZE, "filename"),
                _encode_text(self.mode, MODE_SIZE, "mode"),
            )
        if opcode == Opcode.DATA:
            if len(self.data) > DATA_SIZE:
                raise ValueError(f"data is longer than {DATA_SIZE} bytes")
            return _DATA.pack(
                opcode,
                _check_u16(self.block_number, "block number"),
                len(self.data),
                bytes(self.data),
            )
        if opcode == Opcode.ACK:
            return _ACK.pack(opcode, _check_u16(self.block_number, "block number"))
        return _ERROR.pack(
            opcode,
            _check_u16(self.error_code, "error code"),
            _encode_text(self.error_msg, MESSAGE_SIZE, "error message"),
        )

    @classmethod
    def decode(cls, data: bytes) -> Packet:
        """Parse a packet from its fixed-size wire form."""
        if len(data) != PACKET_SIZE:
            raise ValueError(
                f"packet must be {PACKET_SIZE} bytes, got {len(data)}"
            )
        (raw_opcode,) = _OPCODE.unpack_from(data)
        try:
            opcode: int = Opcode(raw_opcode)
        except ValueError:
            opcode = raw_opcode

        if opcode in (Opcode.RRQ, Opcode.WRQ):
            _, filename, mode = _REQUEST.unpack(data)
            return cls(
                opcode=opcode,
                filename=_decode_text(filename),
                mode=_decode_text(mode),
            )
        if opcode == Opcode.DATA:
            _, block_number, size, payload = _DATA.unpack(data)
            if not 0 <= size <= DATA_SIZE:
                raise ValueError(f"invalid data size {size}")
            return cls(opcode=opcode, block_number=block_number, data=payload[:size])
        if opcode == Opcode.ACK:
            _, block_number = _ACK.unpack(data)
            return cls(opcode=opcode, block_number=block_number)
        _, error_code, message = _ERROR.unpack(data)
        return cls(
            opcode=opcode,
            error_code=error_code,
            error_msg=_decode_text(message),
        )