# sorokit

Byte containers, SHA-256 hashing, ed25519 signature checks and authorization
context types for contract tooling, in plain Python.

## Installation

```
pip install sorokit
```

To run the test suite, install the test extra and run pytest:

```
pip install "sorokit[test]"
pytest
```

## Growable bytes: `sorokit.bytes`

`Bytes` is a growable sequence of byte values. Checked accessors (`get`,
`first`, `last`, `pop_back`) return `None` when there is nothing there, and
`remove` returns `False` for an index out of range. The `*_unchecked`
accessors, and `set`, `insert`, `insert_from_bytes`, `copy_from_slice` and
`slice`, raise `HostError` (`HostError: Error(Object, IndexBounds)`) when an
index is out of range. Pushing a value outside 0..255 raises `ValueError`.

```python
from sorokit.bytes import Bytes

b = Bytes.from_slice([1, 2, 3, 4])
b.extend_from_slice([5, 6, 7, 8])
b.insert_from_slice(1, [9, 10])
assert b.copy_into_slice(10) == bytes([1, 9, 10, 2, 3, 4, 5, 6, 7, 8])

assert b.get(100) is None
assert b.first() == 1
assert b.pop_back() == 8
print(b)  # Bytes(1, 9, 10, 2, 3, 4, 5, 6, 7)
```

`copy_into_slice(length)` returns the contents as `bytes` and raises
`ValueError` if `length` differs from the current length. `copy_from_slice(i,
items)` overwrites from position `i`, growing the array when needed.
`slice(start, end)` returns a new `Bytes` for the range `[start, end)`.

`Bytes.iter()` returns a `BytesIter` over a snapshot of the contents. It is an
ordinary Python iterator and can also be consumed from the back with
`next_back()`, which returns `None` once both ends meet:

```python
it = Bytes.from_slice([10, 20, 30]).iter()
assert next(it) == 10
assert it.next_back() == 30
assert it.next_back() == 20
assert it.next_back() is None
```

`Bytes` values compare by content, order lexicographically and are hashable.

## Fixed-size bytes: `sorokit.bytesn`

`BytesN(size, data)` holds exactly `size` bytes; a length mismatch raises
`ConversionError`. `BytesN.from_array(items)` takes its size from `items`,
and `BytesN.from_bytes(size, value)` converts a `Bytes` or any byte sequence.

```python
from sorokit.bytes import Bytes
from sorokit.bytesn import BytesN
from sorokit.errors import ConversionError

fixed = BytesN.from_bytes(3, Bytes.from_slice([10, 20, 30]))
print(repr(fixed))  # BytesN<3>(10, 20, 30)
assert fixed == bytes([10, 20, 30])

try:
    BytesN.from_bytes(4, Bytes.from_slice([10, 20, 30]))
except ConversionError:
    pass
```

`to_array()` and `to_bytes()` return `bytes`; `as_bytes()` returns a
growable `Bytes` copy. `is_empty()` is always `False`.

## Literals: `sorokit.literals`

`make_bytes` and `make_bytesn` build values from a list of bytes or from an
integer literal. `bytes_literal` turns a literal into big-endian `bytes`:
hex (`"0x..."`) and binary (`"0b..."`) literals given as text keep their
leading zeros, while ints and decimal text use the fewest bytes (at least one).

```python
from sorokit.literals import bytes_literal, make_bytes, make_bytesn

assert make_bytes().is_empty()
assert make_bytes(0x30201).to_bytes() == bytes([3, 2, 1])
assert make_bytesn("0x0000030201").to_array() == bytes([0, 0, 3, 2, 1])
assert bytes_literal(1) == b"\x01"
```

## Crypto: `sorokit.crypto`

```python
from sorokit.bytes import Bytes
from sorokit.crypto import sha256, ed25519_verify

digest = sha256(Bytes.from_slice(b"hello"))
assert len(digest) == 32
```

`sha256(data)` returns a 32-byte `BytesN`. `ed25519_verify(public_key,
message, signature)` returns nothing when the signature is valid; it raises
`ConversionError` if the key is not 32 bytes or the signature not 64 bytes,
and `HostError` (`Error(Crypto, InvalidInput)`) if the signature does not
verify.

## Authorization contexts: `sorokit.auth`

Immutable dataclasses describe authorized calls:

- `ContractContext(contract, fn_name, args)`: `fn_name` must be a symbol of at
  most 32 characters from letters, digits and `_`, otherwise
  `ConversionError`.
- `ContractExecutableWasm(wasm_hash)`: `wasm_hash` is converted to a 32-byte
  `BytesN`.
- `CreateContractHostFnContext(executable, salt)`: `salt` is converted to a
  32-byte `BytesN`.
- `SubContractInvocation(context, sub_invocations)`: a node in a tree of
  authorizations; sub-invocations must be `SubContractInvocation` or
  `CreateContractHostFnContext` values.

`CustomAccountInterface` is an abstract base class for accounts that check
signatures; subclasses implement `check_auth(signature_payload, signatures,
auth_contexts)` and raise when the authorization is not valid.

## What the package does not do

There is no host environment here: no contract registration or invocation,
no ledger storage, no deployment, no address types and no command-line tool.
The authorization types only describe contexts; nothing in the package
enforces them.