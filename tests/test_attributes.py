import json

import pytest

from balind.attributes import json_serialize_address_list, json_serialize_bigint_list, to_signed_bytes_be

from builders import addr


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, b"\x00"),
        (1, b"\x01"),
        (127, b"\x7f"),
        (128, b"\x00\x80"),
        (255, b"\x00\xff"),
        (256, b"\x01\x00"),
        (-1, b"\xff"),
        (-128, b"\x80"),
        (-129, b"\xff\x7f"),
    ],
)
def test_to_signed_bytes_be(value: int, expected: bytes) -> None:
    assert to_signed_bytes_be(value) == expected


def test_uint256_max_keeps_sign_byte() -> None:
    encoded = to_signed_bytes_be(2**256 - 1)

    assert len(encoded) == 33
    assert encoded[0] == 0


def test_json_serialize_address_list() -> None:
    encoded = json_serialize_address_list([addr(0x01), addr(0xAB)])

    assert encoded == b'["0x' + b"01" * 20 + b'","0x' + b"ab" * 20 + b'"]'
    assert json.loads(encoded) == ["0x" + "01" * 20, "0x" + "ab" * 20]


def test_json_serialize_bigint_list() -> None:
    assert json_serialize_bigint_list([5 * 10**17, 0]) == b'["0x06f05b59d3b20000","0x00"]'


def test_empty_lists() -> None:
    assert json_serialize_address_list([]) == b"[]"
    assert json_serialize_bigint_list([]) == b"[]"
