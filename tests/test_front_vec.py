import pytest

from steelmc.front_vec import FrontVec


def test_front_space_reservation_and_write_safe():
    fv = FrontVec(4, 8)

    assert fv.front_space == 4
    assert len(fv) == 0
    assert bytes(fv) == b""

    fv.extend([1, 2, 3])
    assert bytes(fv) == bytes([1, 2, 3])

    fv.set_in_front(bytes([0xAA, 0xBB]))
    assert bytes(fv) == bytes([0xAA, 0xBB, 1, 2, 3])

    fv.set_in_front(bytes([0xCC]))
    assert bytes(fv) == bytes([0xCC, 0xAA, 0xBB, 1, 2, 3])

    assert fv.front_space == 1


def test_set_in_front_raises_if_no_space():
    fv = FrontVec(2, 4)
    with pytest.raises(ValueError, match="Not enough reserved space"):
        fv.set_in_front(bytes([1, 2, 3]))


def test_new_without_capacity():
    fv = FrontVec(3)
    assert fv.front_space == 3
    assert len(fv) == 0


def test_push_and_write():
    fv = FrontVec(1)
    fv.push(7)
    assert fv.write(b"\x08\x09") == 2
    assert bytes(fv) == b"\x07\x08\x09"
    assert len(fv) == 3
    with pytest.raises(ValueError):
        fv.push(256)


def test_indexing_views_only_content():
    fv = FrontVec(2)
    fv.extend(b"abc")
    assert fv[0] == ord("a")
    assert fv[-1] == ord("c")
    assert fv[1:] == b"bc"
    assert fv[::-1] == b"cba"
    with pytest.raises(IndexError):
        fv[3]


def test_item_assignment():
    fv = FrontVec(2)
    fv.extend(b"abc")
    fv[0] = ord("z")
    fv[1:3] = b"xy"
    assert bytes(fv) == b"zxy"
    with pytest.raises(ValueError):
        fv[0:2] = b"q"
    with pytest.raises(IndexError):
        fv[5] = 1


def test_iteration_matches_bytes():
    fv = FrontVec(4)
    fv.extend(b"hello")
    fv.set_in_front(b"\x05")
    assert list(fv) == list(bytes(fv))