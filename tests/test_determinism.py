import pytest

from randomness.sim.determinism import clock_seed_int, resolve_seed, seed_from_int, seed_to_int


def test_seed_from_int_is_128_bit_little_endian() -> None:
    assert seed_from_int(0) == bytes(16)
    assert seed_from_int(1) == b"\x01" + bytes(15)
    assert seed_from_int(0xBAD5EED)[:4] == bytes([0xED, 0x5E, 0xAD, 0x0B])
    assert seed_to_int(seed_from_int(123456789)) == 123456789


@pytest.mark.parametrize("bad", [-1, 1 << 128])
def test_seed_from_int_rejects_out_of_range(bad: int) -> None:
    with pytest.raises(ValueError):
        seed_from_int(bad)


def test_seed_to_int_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        seed_to_int(b"short")


def test_resolve_seed_precedence(monkeypatch) -> None:
    assert resolve_seed(5, 7) == 5
    assert resolve_seed(None, 7) == 7
    monkeypatch.setattr("randomness.sim.determinism.clock_seed_int", lambda: 99)
    assert resolve_seed(None, None) == 99


def test_clock_seed_fits() -> None:
    assert 0 <= clock_seed_int() < (1 << 128)
