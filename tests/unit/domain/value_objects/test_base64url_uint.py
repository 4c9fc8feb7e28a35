from __future__ import annotations

import pytest
from jose.utils import long_to_base64

import ptypes.domain.value_objects.base64url_uint as uint_module
from ptypes.domain.enums.encoding import Base64Alphabet, Base64DecodeReason
from ptypes.domain.exceptions.values import Base64DecodeError
from ptypes.domain.services.base64_codec import set_default_alphabet
from ptypes.domain.value_objects.base64url_uint import Base64urlUInt


@pytest.mark.parametrize("alphabet", list(Base64Alphabet))
def test_end_to_end_small_integer(alphabet: Base64Alphabet) -> None:
    value = Base64urlUInt(bytes([1, 2, 3]), alphabet=alphabet)

    assert value.encode() == "AQID"
    assert str(value) == "AQID"
    assert Base64urlUInt.decode("AQID", alphabet).data == bytes([1, 2, 3])
    assert value.to_int() == int(value) == 66051 == 0x010203


@pytest.mark.parametrize(
    "data",
    [b"", b"\x00", b"\x00\x01\x02", b"\xfb\xff", bytes(range(256))],
)
def test_round_trip_preserves_bytes(data: bytes) -> None:
    for alphabet in Base64Alphabet:
        text = Base64urlUInt(data, alphabet=alphabet).encode()
        assert Base64urlUInt.decode(text, alphabet).data == data


def test_leading_zero_bytes_are_kept() -> None:
    value = Base64urlUInt(bytes([0, 1, 2]))

    assert value.encode() == "AAEC"
    assert Base64urlUInt.decode("AAEC").data == b"\x00\x01\x02"
    assert len(value) == 3


def test_alphabet_defaults_to_process_setting() -> None:
    assert Base64urlUInt(b"\xfb\xff").encode() == "-_8"

    set_default_alphabet(Base64Alphabet.STANDARD_NO_PAD)

    assert Base64urlUInt(b"\xfb\xff").encode() == "+/8"
    assert Base64urlUInt.decode("+/8").data == b"\xfb\xff"


def test_alphabet_is_fixed_at_construction() -> None:
    value = Base64urlUInt(b"\xfb\xff")

    set_default_alphabet(Base64Alphabet.STANDARD_NO_PAD)

    assert value.alphabet is Base64Alphabet.URL_SAFE_NO_PAD
    assert value.encode() == "-_8"
    assert value.with_alphabet(Base64Alphabet.STANDARD_NO_PAD).encode() == "+/8"


def test_decode_rejects_padding() -> None:
    with pytest.raises(Base64DecodeError) as excinfo:
        Base64urlUInt.decode("AQ==")

    assert excinfo.value.reason is Base64DecodeReason.INVALID_PADDING
    assert excinfo.value.kind == "malformed-base64"


@pytest.mark.parametrize(
    ("text", "alphabet"),
    [
        ("-_8", Base64Alphabet.STANDARD_NO_PAD),
        ("+/8", Base64Alphabet.URL_SAFE_NO_PAD),
    ],
)
def test_decode_rejects_other_alphabet(text: str, alphabet: Base64Alphabet) -> None:
    with pytest.raises(Base64DecodeError) as excinfo:
        Base64urlUInt.decode(text, alphabet)

    assert excinfo.value.reason is Base64DecodeReason.INVALID_SYMBOL
    assert excinfo.value.offset == 0


def test_from_int_uses_minimal_big_endian_encoding() -> None:
    assert Base64urlUInt.from_int(65537).encode() == "AQAB"
    assert Base64urlUInt.from_int(0).data == b"\x00"
    assert Base64urlUInt.from_int(255).data == b"\xff"
    assert Base64urlUInt.from_int(256).data == b"\x01\x00"


@pytest.mark.parametrize("n", [1, 65537, 2**64 + 5, 2**2048 - 1])
def test_from_int_matches_jose_jwk_encoding(n: int) -> None:
    value = Base64urlUInt.from_int(n, Base64Alphabet.URL_SAFE_NO_PAD)

    assert value.encode() == long_to_base64(n).decode("ascii")
    assert value.to_int() == n


def test_from_int_rejects_negative() -> None:
    with pytest.raises(ValueError, match="value must be >= 0"):
        Base64urlUInt.from_int(-1)


def test_empty_value_is_zero() -> None:
    assert Base64urlUInt().to_int() == 0
    assert Base64urlUInt().encode() == ""


def test_equality_and_hash_use_bytes_only() -> None:
    url = Base64urlUInt(b"\x01\x02", alphabet=Base64Alphabet.URL_SAFE_NO_PAD)
    std = Base64urlUInt(b"\x01\x02", alphabet=Base64Alphabet.STANDARD_NO_PAD)

    assert url == std
    assert hash(url) == hash(std)
    assert url != Base64urlUInt(b"\x00\x01\x02")


def test_repr_does_not_reveal_bytes() -> None:
    value = Base64urlUInt(b"secret")

    assert "secret" not in repr(value)
    assert str(value) not in repr(value)
    assert "<6 bytes>" in repr(value)


def test_wipe_zeroes_buffer() -> None:
    value = Base64urlUInt(b"\x01\x02\x03")

    value.wipe()

    assert value.data == b"\x00\x00\x00"


def test_context_manager_wipes_on_exit() -> None:
    with Base64urlUInt.decode("AQID") as value:
        assert value.to_int() == 66051

    assert value.data == b"\x00\x00\x00"


def test_context_manager_wipes_on_error() -> None:
    with pytest.raises(RuntimeError):
        with Base64urlUInt(b"\x07\x07") as value:
            raise RuntimeError("boom")

    assert value.data == b"\x00\x00"


def test_finalizer_wipes_buffer() -> None:
    value = Base64urlUInt(b"\x09\x09\x09")
    buffer = value._buffer

    del value

    assert buffer == bytearray(3)


def test_decode_wipes_temporary_buffer(monkeypatch: pytest.MonkeyPatch) -> None:
    wiped: list[bytes] = []
    real_wipe = uint_module.wipe

    def _spy(buffer: bytearray) -> None:
        real_wipe(buffer)
        wiped.append(bytes(buffer))

    monkeypatch.setattr(uint_module, "wipe", _spy)

    value = Base64urlUInt.decode("AQID")

    assert b"\x00\x00\x00" in wiped
    assert all(entry == bytes(len(entry)) for entry in wiped)
    assert value.data == b"\x01\x02\x03"


def test_constructor_copies_input() -> None:
    source = bytearray(b"\x01\x02")
    value = Base64urlUInt(source)

    source[0] = 0xFF

    assert value.data == b"\x01\x02"
