# pcmmcops

A small library with no dependencies. It builds and checks COPS
(Common Open Policy Service, RFC 2748) messages and objects in the form
that PacketCable Multimedia (PCMM) uses.

## Installation

```
pip install pcmmcops
```

## What it provides

Everything is in `pcmmcops.cops`. The builders return `bytes` in
network byte order.

### Constants and enumerations

- `COPS_VERSION` is 1.
- `COMMON_OBJ_LEN` is 8.
- `CLIENT_TYPE_PCMM` is `0x800A`.
- `MAX_MESSAGE_LEN` is 1000.
- `OpCode` is an `IntEnum` of the COPS operations: `REQ`, `DEC`, `RPT`,
  `DRQ`, `SSQ`, `OPN`, `CAT`, `CC`, `KA` and `SSC`, numbered 1 to 10.
- `ObjectClass` is an `IntEnum` of the common object C-Num values 1 to 16.
  Examples are `HANDLE`, `CONTEXT`, `DECISION`, `KA_TIMER` and
  `ACCT_TIMER`.

### Validation

- `opcode_ok(opcode)` is true for the op codes PCMM uses: 1 to 4 and
  6 to 9. Codes 5 (SSQ) and 10 (SSC) are rejected.
- `header_ok(opcode, client_type, message_len)` accepts a common header
  in either of two cases:
  - the op code passes `opcode_ok`, the client type is `0x800A`, and the
    length is between 1 and 999;
  - it is a Keep-Alive (op code 9) with client type 0.
- `class_ok(cnum, ctype)` is true when the C-Num is one of 1, 2, 6, 8, 9,
  10, 11 or 12 and the C-Type is 1, 2 or 3.

### Names

- `opcode_acronym(opcode)` returns the acronym, such as `"REQ"`, `"CAT"`
  or `"KA"`.
- `object_name(cnum)` returns the object name, such as `"Handle"`,
  `"Keep-Alive Timer"` or `"Message Integrity"`.
- Both return `"NIL"` for an unknown value.

### Objects and messages

- `handle_object(handle)` builds the 8-byte Handle object (C-Num 1,
  C-Type 1). It takes a `str` or bytes-like handle and uses its first
  4 bytes. A `str` is encoded as Latin-1.
- `context_object()` builds a Context object (C-Num 2, C-Type 1). Its
  R-Type is 8 (configuration request) and its M-Type is 0.
- `decision_object()` builds a Decision object (C-Num 6, C-Type 1). Its
  command code is 1 and its flags are 1.
- `pack_control_objects(handle, context, decision, command, application,
  subscriber, decision_length, ip_length)` joins these parts in order:
  1. the first 8 bytes of `handle`, `context` and `decision`;
  2. a 2-byte `decision_length` followed by the bytes `6, 4`;
  3. the first 8 bytes of `command` and of `application`;
  4. the first `ip_length` bytes of `subscriber`.
- `client_accept(ka_timer, acct_timer)` builds a Client-Accept message
  that holds a Keep-Alive Timer object. When `acct_timer` is not 0 it also
  holds an Accounting Timer object, and the message is 24 bytes instead
  of 16.
- `keepalive()` builds the 8-byte Keep-Alive message, with client type 0
  and length 8.
- `new_message(opcode, data, length)` writes a PCMM common header with
  the given op code and length. If `data` is given, the header is followed
  by the first `length - 8` bytes of `data`. If `data` is `None`, only the
  header is returned.

### Errors

The builders raise `ValueError` in these cases:

- an input is shorter than the number of bytes that must be taken from it;
- a timer does not fit in 32 bits unsigned;
- `new_message` is given data with a length below 8.

## Example

```python
from pcmmcops.cops import client_accept, handle_object, keepalive, opcode_acronym

msg = client_accept(30, 15)
assert len(msg) == 24
assert opcode_acronym(msg[1]) == "CAT"

assert handle_object(b"abcd")[4:] == b"abcd"
assert keepalive() == bytes([0x10, 9, 0, 0, 0, 0, 0, 8])
```

## What it does not do

This package only encodes and checks values. It does not:

- open connections or send or receive messages;
- act as a COPS client or as a policy server;
- parse or decode received COPS messages into objects.

## Running the tests

```
pip install -e ".[test]"
pytest
```