# evmutils

Building blocks for modelling EVM smart-contract state in plain Python.
Numbers are `int` values checked against their Solidity widths (`uint256`,
`uint160`, `uint96`, `uint8`), hashes and addresses are `bytes`, and every
failure is raised as an exception.

## Installation

```
pip install evmutils
```

To run the test suite:

```
pip install "evmutils[test]"
pytest
```

## Modules

### `evmutils.math`

- `sqrt(a)` – integer square root of a `uint256`, rounded towards zero.
- `average(a, b)` – average of two `uint256` values, rounded towards zero,
  computed as `(a & b) + ((a ^ b) >> 1)` so the sum never overflows.
- `add_unchecked(current, rhs)` / `sub_unchecked(current, rhs)` – addition
  and subtraction that wrap modulo 2²⁵⁶.
- `U256_MAX` – the largest `uint256`.

Values that are not `int` raise `TypeError`; values outside the `uint256`
range raise `ValueError`.

### `evmutils.bitmap`

`BitMap` packs booleans for `uint256` indices into 256-bit buckets
(`index >> 8` selects the bucket, `index & 0xFF` the bit). Methods: `get`,
`set`, `unset` and `set_to(index, value)`. Every bit starts unset.

### `evmutils.nonces`

`Nonces` keeps a counter per owner (any hashable value), starting at 0.

- `nonces(owner)` – the next unused nonce.
- `use_nonce(owner)` – return the current nonce and advance it.
- `use_checked_nonce(owner, nonce)` – advance only if `nonce` is the current
  one; otherwise raise `InvalidAccountNonce`, which carries `account` and
  `current_nonce`.

Advancing a nonce past the `uint256` maximum raises `OverflowError`.

### `evmutils.pausable`

`Pausable(paused=False)` is an emergency stop switch.

- `paused()` – the current state.
- `pause(account)` / `unpause(account)` – change the state, append a
  `Paused` / `Unpaused` event (a frozen dataclass holding `account`) to
  `events`, and return it.
- `when_not_paused()` raises `EnforcedPause` if paused; `when_paused()`
  raises `ExpectedPause` if not. Both derive from `PausableError`, and
  `pause` / `unpause` use these guards.

### `evmutils.checkpoints`

`Trace160` is a history of `(key, value)` checkpoints with 96-bit keys and
160-bit values, kept in non-decreasing key order.

- `push(key, value)` – append a checkpoint, or overwrite the last one when
  the key is equal; returns `(previous_value, new_value)`, with 0 as the
  previous value of an empty history. A key lower than the last raises
  `CheckpointUnorderedInsertion` (attributes `key` and `last_key`).
- `lower_lookup(key)` – value of the oldest checkpoint with key ≥ `key`, or 0.
- `upper_lookup(key)` – value of the newest checkpoint with key ≤ `key`, or 0.
- `upper_lookup_recent(key)` – the same answer as `upper_lookup`, narrowing
  the search towards the end first when there are more than five checkpoints.
- `latest()` – value of the last checkpoint, or 0.
- `latest_checkpoint()` – `(key, value)` of the last checkpoint, or `None`.
- `length()` (also `len(trace)`) and `at(pos)`, which raises `IndexError`
  for a position out of range.

### `evmutils.metadata`

`Metadata(name="", symbol="")` with `name()` and `symbol()`.

### `evmutils.eip712`

- `keccak256(data)` – 32-byte Keccak-256 digest.
- `to_typed_data_hash(domain_separator, struct_hash)` – keccak256 of
  `0x19 0x01 ‖ domain_separator ‖ struct_hash`; both arguments must be
  32 bytes.
- `Eip712(name, version, chain_id, verifying_contract)` – a frozen signing
  domain. `verifying_contract` may be 20 bytes or a 40-digit hex string
  (with or without `0x`). Methods:
  - `eip712_domain()` – an `Eip712Domain` named tuple of `fields`, `name`,
    `version`, `chain_id`, `verifying_contract`, `salt` and `extensions`.
  - `domain_separator_v4()` – the domain separator for the chain and contract.
  - `hash_typed_data_v4(struct_hash)` – the digest to be signed.
- Constants `TYPE_HASH`, `FIELDS`, `SALT` and `TYPED_DATA_PREFIX`.

### `evmutils.ecdsa`

Signer recovery on secp256k1, computed in pure Python.

- `ecrecover(hash, v, r, s)` – behaves like the `ecrecover` precompile:
  returns the 20-byte signer address, or the zero address when `v` is not
  27 or 28, `r` or `s` is out of range, or no key can be recovered.
- `recover(hash, v, r, s)` – raises `ECDSAInvalidSignatureS` when `s` is
  above `SIGNATURE_S_UPPER_BOUND`, and `ECDSAInvalidSignature` when `v` is
  0 or 1 or the recovered address is zero; otherwise returns the signer.
- `check_if_malleable(s)` – raises `ECDSAInvalidSignatureS` (attribute `s`)
  for an `s` in the upper half order.
- `encode_calldata(hash, v, r, s)` – the 128-byte ABI-encoded precompile
  input.
- Errors derive from `ECDSAError`; `ECDSAInvalidSignatureLength` (attribute
  `length`) is provided for callers that validate raw signature lengths.
- Constants `ECRECOVER_ADDR`, `ZERO_ADDRESS` and `SIGNATURE_S_UPPER_BOUND`.

## Example

```python
from evmutils.checkpoints import Trace160
from evmutils.ecdsa import recover

trace = Trace160()
trace.push(1, 11)
trace.push(3, 33)
assert trace.upper_lookup(2) == 11
assert trace.lower_lookup(2) == 33

signer = recover(
    bytes.fromhex("a1de988600a42c4b4ab089b619297c17d53cffae5d5120d82d8a92d0bb3b78f2"),
    28,
    bytes.fromhex("65e72b1cf8e189569963750e10ccb88fe89389daeeb8b735277d59cd6885ee82"),
    bytes.fromhex("3eb5a6982b540f185703492dab77b863a88ce01f27e21ade8b2879c10fc9e653"),
)
print("0x" + signer.hex())
```

## What this package does not do

All state lives in ordinary Python objects in memory. The package does not
run or deploy contracts, talk to a node or a chain, persist anything, or
know who the caller of an operation is (callers pass the account to
`Pausable.pause` and `unpause` themselves). It recovers signers but does not
create signatures, and it offers no command-line tool.