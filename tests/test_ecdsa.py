import pytest
from hypothesis import given, strategies as st

from evmutils.ecdsa import (
    SIGNATURE_S_UPPER_BOUND,
    ZERO_ADDRESS,
    ECDSAError,
    ECDSAInvalidSignature,
    ECDSAInvalidSignatureLength,
    ECDSAInvalidSignatureS,
    check_if_malleable,
    ecrecover,
    encode_calldata,
    recover,
)

HASH = bytes.fromhex("a1de988600a42c4b4ab089b619297c17d53cffae5d5120d82d8a92d0bb3b78f2")
V = 28
R = bytes.fromhex("65e72b1cf8e189569963750e10ccb88fe89389daeeb8b735277d59cd6885ee82")
S = bytes.fromhex("3eb5a6982b540f185703492dab77b863a88ce01f27e21ade8b2879c10fc9e653")
ADDRESS = bytes.fromhex("f39Fd6e51aad88F6F4ce6aB8827279cffFb92266")


def test_prepares_calldata():
    expected = bytes.fromhex(
        "a1de988600a42c4b4ab089b619297c17d53cffae5d5120d82d8a92d0bb3b78f2"
        "000000000000000000000000000000000000000000000000000000000000001c"
        "65e72b1cf8e189569963750e10ccb88fe89389daeeb8b735277d59cd6885ee82"
        "3eb5a6982b540f185703492dab77b863a88ce01f27e21ade8b2879c10fc9e653"
    )
    assert encode_calldata(HASH, V, R, S) == expected


def test_rejects_invalid_s():
    invalid_s = (SIGNATURE_S_UPPER_BOUND + 1).to_bytes(32, "big")
    with pytest.raises(ECDSAInvalidSignatureS) as info:
        check_if_malleable(invalid_s)
    assert info.value.s == invalid_s


def test_validates_s():
    valid_s = (SIGNATURE_S_UPPER_BOUND - 1).to_bytes(32, "big")
    assert check_if_malleable(valid_s) is None


def test_ecrecover_works():
    assert recover(HASH, V, R, S) == ADDRESS


def test_precompile_recovers_same_address():
    assert ecrecover(HASH, V, R, S) == ADDRESS


def test_different_hash_recovers_different_address():
    other_hash = bytes.fromhex(
        "65e72b1cf8e189569963750e10ccb88fe89389daeeb8b735277d59cd6885ee82"
    )
    recovered = recover(other_hash, V, R, S)
    assert recovered == ecrecover(other_hash, V, R, S)
    assert recovered != ADDRESS


def test_different_v_recovers_different_address():
    recovered = recover(HASH, 27, R, S)
    assert recovered == ecrecover(HASH, 27, R, S)
    assert recovered != ADDRESS


def test_different_r_recovers_different_address():
    other_r = bytes.fromhex(
        "b814eaab5953337fed2cf504a5b887cddd65a54b7429d7b191ff1331ca0726b1"
    )
    recovered = recover(HASH, V, other_r, S)
    assert recovered == ecrecover(HASH, V, other_r, S)
    assert recovered != ADDRESS


def test_different_s_recovers_different_address():
    other_s = bytes.fromhex(
        "3eb5a6982b540f185703492dab77b863a99ce01f27e21ade8b2879c10fc9e653"
    )
    recovered = recover(HASH, V, R, other_s)
    assert recovered == ecrecover(HASH, V, R, other_s)
    assert recovered != ADDRESS


@pytest.mark.parametrize("wrong_v", [0, 1])
def test_rejects_v0_v1_with_invalid_signature_error(wrong_v):
    with pytest.raises(ECDSAInvalidSignature):
        recover(HASH, wrong_v, R, S)


def test_rejects_other_v_with_invalid_signature_error():
    with pytest.raises(ECDSAInvalidSignature):
        recover(HASH, 29, R, S)


def test_precompile_returns_zero_address_for_bad_v():
    assert ecrecover(HASH, 0, R, S) == ZERO_ADDRESS


def test_precompile_returns_zero_address_for_zero_r():
    assert ecrecover(HASH, V, bytes(32), S) == ZERO_ADDRESS


def test_error_when_higher_s():
    higher_s = (SIGNATURE_S_UPPER_BOUND + 1).to_bytes(32, "big")
    with pytest.raises(ECDSAInvalidSignatureS) as info:
        recover(HASH, V, R, higher_s)
    assert info.value.s == higher_s


def test_errors_share_base_class():
    assert issubclass(ECDSAInvalidSignature, ECDSAError)
    assert issubclass(ECDSAInvalidSignatureS, ECDSAError)
    assert ECDSAInvalidSignatureLength(64).length == 64


def test_wrong_hash_length_rejected():
    with pytest.raises(ValueError):
        recover(HASH[:31], V, R, S)


def test_out_of_range_v_rejected():
    with pytest.raises(ValueError):
        encode_calldata(HASH, 256, R, S)


@given(st.integers(min_value=SIGNATURE_S_UPPER_BOUND + 1, max_value=(1 << 256) - 1))
def test_any_upper_half_s_is_rejected(value):
    s = value.to_bytes(32, "big")
    with pytest.raises(ECDSAInvalidSignatureS) as info:
        recover(HASH, V, R, s)
    assert info.value.s == s