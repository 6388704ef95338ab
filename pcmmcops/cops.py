"""COPS (RFC 2748) message and object encoding for PacketCable Multimedia."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Optional, Union

COPS_VERSION = 1
COMMON_OBJ_LEN = 8
CLIENT_TYPE_PCMM = 0x800A
MAX_MESSAGE_LEN = 1000

BytesLike = Union[bytes, bytearray, memoryview]


class OpCode(IntEnum):
    """COPS operation codes."""

    REQ = 1
    DEC = 2
    RPT = 3
    DRQ = 4
    SSQ = 5
    OPN = 6
    CAT = 7
    CC = 8
    KA = 9
    SSC = 10


class ObjectClass(IntEnum):
    """COPS common object class numbers (C-Num)."""

    HANDLE = 1
    CONTEXT = 2
    IN_INTERFACE = 3
    OUT_INTERFACE = 4
    REASON = 5
    DECISION = 6
    LPDP_DECISION = 7
    ERROR = 8
    CLIENT_SI = 9
    KA_TIMER = 10
    PEP_ID = 11
    REPORT_TYPE = 12
    PDP_REDIRECT_ADDR = 13
    LAST_PDP_ADDR = 14
    ACCT_TIMER = 15
    INTEGRITY = 16


_VALID_PCMM_OPCODES = frozenset(
    {OpCode.REQ, OpCode.DEC, OpCode.RPT, OpCode.DRQ, OpCode.OPN, OpCode.CAT, OpCode.CC, OpCode.KA}
)

_VALID_CNUMS = frozenset({1, 2, 6, 8, 9, 10, 11, 12})
_VALID_CTYPES = frozenset({1, 2, 3})

_OBJECT_NAMES = {
    ObjectClass.HANDLE: "Handle",
    ObjectClass.CONTEXT: "Context",
    ObjectClass.IN_INTERFACE: "In Interface",
    ObjectClass.OUT_INTERFACE: "Out Interface",
    ObjectClass.REASON: "Reason Code",
    ObjectClass.DECISION: "Decision",
    ObjectClass.LPDP_DECISION: "LPDP Decision",
    ObjectClass.ERROR: "Error",
    ObjectClass.CLIENT_SI: "Client Specific Info",
    ObjectClass.KA_TIMER: "Keep-Alive Timer",
    ObjectClass.PEP_ID: "PEP Identification",
    ObjectClass.REPORT_TYPE: "Report Type",
    ObjectClass.PDP_REDIRECT_ADDR: "PDP Redirect Address",
    ObjectClass.LAST_PDP_ADDR: "Last PDP Address",
    ObjectClass.ACCT_TIMER: "Accounting Timer",
    ObjectClass.INTEGRITY: "Message Integrity",
}

_UNKNOWN = "NIL"


def _version_flags(flags: int = 0) -> int:
    return (COPS_VERSION << 4) | (flags & 0x0F)


def _object_header(num: int, ctype: int) -> bytes:
    return struct.pack(">HBB", COMMON_OBJ_LEN, num & 0xFF, ctype & 0xFF)


def _uint32(value: int, name: str) -> int:
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{name} must fit in 32 bits unsigned, got {value}")
    return value


def _take(data: BytesLike, count: int, name: str) -> bytes:
    raw = bytes(data)
    if len(raw) < count:
        raise ValueError(f"{name} needs at least {count} bytes, got {len(raw)}")
    return raw[:count]


def opcode_ok(opcode: int) -> bool:
    """Return whether the op code is one used by PCMM (codes 5 and 10 are not)."""
    return opcode in _VALID_PCMM_OPCODES


def header_ok(opcode: int, client_type: int, message_len: int) -> bool:
    """Return whether a COPS common header carries acceptable values."""
    pcmm = (
        opcode_ok(opcode)
        and client_type == CLIENT_TYPE_PCMM
        and message_len != 0
        and message_len < MAX_MESSAGE_LEN
    )
    return pcmm or (opcode == OpCode.KA and client_type == 0)


def class_ok(cnum: int, ctype: int) -> bool:
    """Return whether the C-Num/C-Type pair is one PCMM uses."""
    return cnum in _VALID_CNUMS and ctype in _VALID_CTYPES


def opcode_acronym(opcode: int) -> str:
    """Return the message acronym for an op code, or ``"NIL"`` if unknown."""
    try:
        return OpCode(opcode).name
    except ValueError:
        return _UNKNOWN


def object_name(cnum: int) -> str:
    """Return the common object name for a C-Num, or ``"NIL"`` if unknown."""
    try:
        return _OBJECT_NAMES[ObjectClass(cnum)]
    except ValueError:
        return _UNKNOWN


def handle_object(handle: Union[str, BytesLike]) -> bytes:
    """Build a Handle object (C-Num 1, C-Type 1) from a 4-byte client handle."""
    raw = handle.encode("latin-1") if isinstance(handle, str) else handle
    return _object_header(ObjectClass.HANDLE, 1) + _take(raw, 4, "handle")


def context_object() -> bytes:
    """Build a Context object (C-Num 2, C-Type 1): configuration request, M-Type 0."""
    return _object_header(ObjectClass.CONTEXT, 1) + struct.pack(">HH", 8, 0)


def decision_object() -> bytes:
    """Build a Decision flags object (C-Num 6, C-Type 1): Install, Trigger Error."""
    return _object_header(ObjectClass.DECISION, 1) + struct.pack(">HH", 1, 1)


def pack_control_objects(
    handle: BytesLike,
    context: BytesLike,
    decision: BytesLike,
    command: BytesLike,
    application: BytesLike,
    subscriber: BytesLike,
    decision_length: int,
    ip_length: int,
) -> bytes:
    """Concatenate the client-specific decision objects into one payload."""
    parts = [
        _take(handle, 8, "handle"),
        _take(context, 8, "context"),
        _take(decision, 8, "decision"),
        struct.pack(">H", decision_length & 0xFFFF),
        bytes((6, 4)),
        _take(command, 8, "command"),
        _take(application, 8, "application"),
        _take(subscriber, ip_length, "subscriber"),
    ]
    return b"".join(parts)


def client_accept(ka_timer: int, acct_timer: int) -> bytes:
    """Build a Client-Accept message with a Keep-Alive and optional Accounting timer."""
    _uint32(ka_timer, "ka_timer")
    _uint32(acct_timer, "acct_timer")
    length = 16 if acct_timer == 0 else 24
    message = struct.pack(">BBHI", _version_flags(), OpCode.CAT, CLIENT_TYPE_PCMM, length)
    message += _object_header(ObjectClass.KA_TIMER, 1) + struct.pack(">I", ka_timer)
    if acct_timer:
        message += _object_header(ObjectClass.ACCT_TIMER, 1) + struct.pack(">I", acct_timer)
    return message


def keepalive() -> bytes:
    """Build a Keep-Alive message (client type 0, length 8)."""
    return struct.pack(">BBHI", _version_flags(), OpCode.KA, 0, 8)


def new_message(opcode: int, data: Optional[BytesLike], length: int) -> bytes:
    """Build a PCMM COPS message: common header followed by ``length - 8`` bytes of data."""
    header = struct.pack(
        ">BBHI", _version_flags(), opcode & 0xFF, CLIENT_TYPE_PCMM, length & 0xFFFFFFFF
    )
    if data is None:
        return header
    body_len = length - 8
    if body_len < 0:
        raise ValueError(f"length must be at least 8 when data is given, got {length}")
    return header + _take(data, body_len, "data")