import pytest

from evmutils.nonces import InvalidAccountNonce, Nonces

OWNER = "0x00000000000000000000000000000000000000aa"
OTHER = "0x00000000000000000000000000000000000000bb"


def test_initiate_nonce():
    assert Nonces().nonces(OWNER) == 0


def test_use_nonce():
    contract = Nonces()
    assert contract.use_nonce(OWNER) == 0
    assert contract.nonces(OWNER) == 1


def test_use_checked_nonce():
    contract = Nonces()
    contract.use_checked_nonce(OWNER, 0)
    assert contract.nonces(OWNER) == 1


def test_use_checked_nonce_invalid_nonce():
    contract = Nonces()
    with pytest.raises(InvalidAccountNonce) as excinfo:
        contract.use_checked_nonce(OWNER, 1)
    assert excinfo.value.account == OWNER
    assert excinfo.value.current_nonce == 0
    assert contract.nonces(OWNER) == 0


def test_nonces_are_per_account():
    contract = Nonces()
    contract.use_nonce(OWNER)
    contract.use_nonce(OWNER)
    assert contract.nonces(OWNER) == 2
    assert contract.nonces(OTHER) == 0


def test_sequence_of_used_nonces_increments():
    contract = Nonces()
    used = [contract.use_nonce(OWNER) for _ in range(5)]
    assert used == list(range(5))
    assert contract.nonces(OWNER) == len(used)


def test_overflow_at_max_nonce():
    contract = Nonces({OWNER: (1 << 256) - 1})
    with pytest.raises(OverflowError):
        contract.use_nonce(OWNER)