import pytest

from bincodec.config import (
    Configuration,
    Endianness,
    IntEncoding,
    legacy,
    standard,
)


def test_standard_defaults():
    config = standard()
    assert config.endianness is Endianness.LITTLE
    assert config.int_encoding is IntEncoding.VARIABLE
    assert config.limit is None


def test_legacy_defaults():
    config = legacy()
    assert config.endianness is Endianness.LITTLE
    assert config.int_encoding is IntEncoding.FIXED
    assert config.limit is None


def test_default_constructor_matches_standard():
    assert Configuration() == standard()


def test_builder_chain():
    config = standard().with_big_endian().with_fixed_int_encoding()
    assert config.endianness is Endianness.BIG
    assert config.int_encoding is IntEncoding.FIXED


def test_last_call_wins():
    config = (
        standard()
        .with_big_endian()
        .with_little_endian()
        .with_fixed_int_encoding()
        .with_variable_int_encoding()
    )
    assert config == standard()


def test_builder_does_not_mutate_original():
    base = legacy()
    changed = base.with_big_endian()
    assert base.endianness is Endianness.LITTLE
    assert changed.endianness is Endianness.BIG
    assert changed.int_encoding is base.int_encoding


def test_limit_and_no_limit():
    limited = legacy().with_limit(1024)
    assert limited.limit == 1024
    assert limited.int_encoding is IntEncoding.FIXED
    assert limited.with_no_limit().limit is None
    assert limited.with_no_limit() == legacy()


def test_limit_zero_allowed():
    assert standard().with_limit(0).limit == 0


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        standard().with_limit(-1)


def test_non_int_limit_rejected():
    with pytest.raises(TypeError):
        standard().with_limit("10")


def test_configuration_is_frozen():
    config = standard()
    with pytest.raises(AttributeError):
        config.limit = 5
    assert config.limit is None
    assert config == standard()


def test_configurations_are_hashable():
    seen = {standard(), standard(), legacy()}
    assert len(seen) == 2