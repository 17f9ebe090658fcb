import pytest
from hypothesis import given, strategies as st

from bincodec.config import legacy, standard
from bincodec.decoder import (
    Decoder,
    decode_from_slice,
    decode_option_variant,
    decode_slice_len,
)
from bincodec.errors import (
    AllowedRange,
    DecodeError,
    LimitExceeded,
    UnexpectedEnd,
    UnexpectedVariant,
)
from bincodec.read import SliceReader


def make(data, config):
    return Decoder(SliceReader(data), config)


def test_claim_without_limit_does_not_count():
    decoder = make(b"", standard())
    decoder.claim_bytes_read(10**30)
    assert decoder.bytes_read == 0


def test_claim_within_limit_then_exceed():
    decoder = make(b"", standard().with_limit(4))
    decoder.claim_bytes_read(3)
    assert decoder.bytes_read == 3
    with pytest.raises(LimitExceeded):
        decoder.claim_bytes_read(2)


def test_claim_exactly_limit_is_allowed():
    decoder = make(b"", standard().with_limit(4))
    decoder.claim_bytes_read(4)
    assert decoder.bytes_read == 4


def test_unclaim_gives_bytes_back():
    decoder = make(b"", standard().with_limit(4))
    decoder.claim_bytes_read(4)
    decoder.unclaim_bytes_read(3)
    decoder.claim_bytes_read(3)
    assert decoder.bytes_read == 4


def test_unclaim_without_limit_is_noop():
    decoder = make(b"", standard())
    decoder.unclaim_bytes_read(5)
    assert decoder.bytes_read == 0


def test_claim_container_read():
    decoder = make(b"", standard().with_limit(100))
    decoder.claim_container_read(10, 8)
    assert decoder.bytes_read == 80
    with pytest.raises(LimitExceeded):
        decoder.claim_container_read(3, 8)


def test_claim_container_read_overflow():
    decoder = make(b"", standard().with_limit(100))
    with pytest.raises(LimitExceeded):
        decoder.claim_container_read(2**64, 2**64)


def test_option_variant_tags():
    assert decode_option_variant(make(b"\x00", standard()), "Option<u32>") is False
    assert decode_option_variant(make(b"\x01", standard()), "Option<u32>") is True


def test_option_variant_invalid_tag():
    with pytest.raises(UnexpectedVariant) as info:
        decode_option_variant(make(b"\x02", standard()), "Option<u32>")
    assert info.value.found == 2
    assert info.value.allowed == AllowedRange(0, 1)
    assert info.value.type_name == "Option<u32>"


def test_option_variant_empty_input():
    with pytest.raises(UnexpectedEnd) as info:
        decode_option_variant(make(b"", standard()), "Option<u8>")
    assert info.value.additional == 1


def test_slice_len_varint_single_byte():
    assert decode_slice_len(make(b"\x05", standard())) == 5


def test_slice_len_varint_u16_marker():
    data = bytes([251]) + (1000).to_bytes(2, "little")
    assert decode_slice_len(make(data, standard())) == 1000


def test_slice_len_varint_u32_big_endian():
    data = bytes([252]) + (70000).to_bytes(4, "big")
    assert decode_slice_len(make(data, standard().with_big_endian())) == 70000


def test_slice_len_varint_u128_marker_rejected():
    data = bytes([254]) + bytes(16)
    with pytest.raises(DecodeError):
        decode_slice_len(make(data, standard()))


def test_slice_len_fixed_truncated():
    with pytest.raises(UnexpectedEnd) as info:
        decode_slice_len(make(b"\x01\x02\x03", legacy()))
    assert info.value.additional == 5


def test_decode_from_slice_reports_consumed():
    data = (7).to_bytes(8, "little") + b"trailing"
    value, consumed = decode_from_slice(data, legacy(), decode_slice_len)
    assert value == 7
    assert consumed == 8


def test_decode_from_slice_limit_exceeded():
    data = (7).to_bytes(8, "little")
    with pytest.raises(LimitExceeded):
        decode_from_slice(data, legacy().with_limit(4), decode_slice_len)


@given(st.integers(min_value=0, max_value=2**64 - 1), st.sampled_from(["little", "big"]))
def test_fixed_u64_roundtrip(value, order):
    config = legacy() if order == "little" else legacy().with_big_endian()
    data = value.to_bytes(8, order)
    assert decode_from_slice(data, config, decode_slice_len) == (value, 8)


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_varint_u64_marker_roundtrip(value):
    data = bytes([253]) + value.to_bytes(8, "little")
    assert decode_from_slice(data, standard(), decode_slice_len) == (value, 9)