"""Tests for the well-known address table."""

import pytest

from scapy_can_ids.errors import ValueOutOfRange
from scapy_can_ids.registry import ADDRESS_TABLE, Addr, Address, AddressTableValidator, address_names, lookup


def test_known_addresses_resolve() -> None:
    assert lookup(0) is Addr.PRIMARY_ENGINE_CONTROLLER
    assert lookup(11) is Addr.BRAKES
    assert lookup(41) is Addr.RETARDER_EXHAUST_ENGINE_1
    assert lookup(249) is Addr.SERVICE_TOOL
    assert lookup(255) is Addr.SOURCE_ADDRESS_REQUEST_1


def test_unassigned_addresses_resolve_to_none() -> None:
    for byte in (2, 4, 12, 126, 248, 253):
        assert lookup(byte) is None


def test_lookup_is_total_over_a_byte() -> None:
    resolved = [lookup(byte) for byte in range(256)]

    assert sum(addr is not None for addr in resolved) == len(Addr) == 58
    for byte, addr in enumerate(resolved):
        if addr is not None:
            assert int(addr) == byte


def test_lookup_rejects_values_outside_a_byte() -> None:
    with pytest.raises(ValueOutOfRange):
        lookup(256)
    with pytest.raises(ValueOutOfRange):
        lookup(-1)


def test_display_names() -> None:
    assert str(Addr.RETARDER_EXHAUST_ENGINE_1) == "Retarder, Exhaust, Engine #1"
    assert Addr.BRAKES.display_name == "Brakes | System Controller (ABS)"
    assert address_names()[0] == "Primary Engine Controller | (CPC, ECM)"
    assert len(address_names()) == len(Addr)


def test_address_value_lookup() -> None:
    assert Address(41).lookup() is Addr.RETARDER_EXHAUST_ENGINE_1
    assert Address(2).lookup() is None
    assert Address(11) == 11
    assert repr(Address(11)) == "Address(11)"

    with pytest.raises(ValueOutOfRange):
        Address(300)


def test_address_table_is_valid() -> None:
    assert [code for code, _ in ADDRESS_TABLE] == sorted(int(a) for a in Addr)
    assert list(AddressTableValidator().validate()) == []


def test_validator_reports_broken_tables() -> None:
    table = [
        (5, Addr.TRANSMISSION_SHIFT_SELECTOR),
        (3, Addr.PRIMARY_TRANSMISSION_CONTROLLER),
        (4, Addr.BRAKES),
    ]
    errors = list(AddressTableValidator(table, names={5: "Shift", 3: " "}).validate())

    assert "Address 3 is out of order or duplicated" in errors
    assert "Address 3 has a blank display name" in errors
    assert "Address 4 is mapped to BRAKES (11)" in errors
    assert "Address 4 has no display name" in errors


def test_address_rejects_non_integers() -> None:
    with pytest.raises(TypeError):
        Address(11.9)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Address(True)
    assert Address(Addr.BRAKES).lookup() is Addr.BRAKES
