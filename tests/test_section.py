import pytest

from steelmc.section import (
    BLOCK_PALETTE_SIZE,
    ChunkSections,
    PalettedContainer,
    SubChunk,
    block_palette,
)
from steelmc.types import BlockStateId


def _palette_total(container):
    return sum(count for _, count in container.palette)


def test_homogeneous_get_returns_fill_value_everywhere():
    container = PalettedContainer(4, 7)
    assert container.is_homogeneous
    assert {container.get(x, y, z) for x in range(4) for y in range(4) for z in range(4)} == {7}
    assert container.palette == ((7, 4**3),)


def test_set_same_value_keeps_homogeneous():
    container = PalettedContainer(4, 7)
    assert container.set(1, 1, 1, 7) == 7
    assert container.is_homogeneous


def test_set_different_value_becomes_heterogeneous():
    container = block_palette(0)
    assert container.set(1, 2, 3, 5) == 0
    assert not container.is_homogeneous
    assert container.get(1, 2, 3) == 5
    assert container.get(3, 2, 1) == 0
    counts = dict(container.palette)
    assert counts[5] == 1
    assert counts[0] == BLOCK_PALETTE_SIZE**3 - 1


def test_setting_back_returns_to_homogeneous():
    container = PalettedContainer(4, 1)
    container.set(0, 0, 0, 2)
    assert container.set(0, 0, 0, 1) == 2
    assert container.is_homogeneous
    assert container.get(0, 0, 0) == 1


def test_palette_total_is_volume_after_many_sets():
    container = PalettedContainer(3, 0)
    for i, (x, y, z) in enumerate([(0, 0, 0), (1, 2, 0), (2, 2, 2), (0, 0, 0), (1, 1, 1)]):
        container.set(x, y, z, i % 3)
        assert _palette_total(container) == container.volume
        assert len({v for v, _ in container.palette}) == len(container.palette)


def test_value_removed_from_palette_when_count_reaches_zero():
    container = PalettedContainer(2, 0)
    container.set(0, 0, 0, 1)
    container.set(1, 0, 0, 2)
    container.set(0, 0, 0, 2)
    assert 1 not in dict(container.palette)
    assert dict(container.palette)[2] == 2


def test_whole_cube_overwritten_becomes_homogeneous_with_new_value():
    container = PalettedContainer(2, 0)
    for x in range(2):
        for y in range(2):
            for z in range(2):
                container.set(x, y, z, 9)
    assert container.is_homogeneous
    assert container.palette == ((9, 8),)


def test_size_one_container_replaces_value():
    container = PalettedContainer(1, 3)
    assert container.set(0, 0, 0, 4) == 3
    assert container.is_homogeneous
    assert container.get(0, 0, 0) == 4


def test_from_cube_uniform_is_homogeneous():
    cube = [[[6] * 2 for _ in range(2)] for _ in range(2)]
    container = PalettedContainer.from_cube(2, cube)
    assert container.is_homogeneous
    assert container.get(1, 1, 1) == 6


def test_from_cube_is_indexed_y_z_x():
    cube = [[[0, 0], [0, 0]], [[0, 0], [0, 0]]]
    cube[1][0][1] = 8
    container = PalettedContainer.from_cube(2, cube)
    assert container.get(1, 1, 0) == 8
    assert container.get(0, 1, 1) == 0
    assert dict(container.palette) == {0: 7, 8: 1}


def test_from_cube_rejects_wrong_shape():
    with pytest.raises(ValueError):
        PalettedContainer.from_cube(2, [[[0, 0], [0, 0]]])


def test_out_of_range_coordinates_raise():
    container = PalettedContainer(4, 0)
    with pytest.raises(IndexError):
        container.get(4, 0, 0)
    with pytest.raises(IndexError):
        container.set(0, -1, 0, 1)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        PalettedContainer(0, 0)


def _sections(count):
    return ChunkSections([SubChunk(block_palette(0)) for _ in range(count)], -64)


def test_chunk_sections_set_and_get_across_sections():
    chunk = _sections(2)
    chunk.set_relative_block(3, BLOCK_PALETTE_SIZE + 2, 4, BlockStateId(11))
    assert chunk.get_relative_block(3, BLOCK_PALETTE_SIZE + 2, 4) == BlockStateId(11)
    assert chunk.get_relative_block(3, 2, 4) == BlockStateId(0)
    assert chunk.sections[1].block_states.get(3, 2, 4) == 11
    assert chunk.sections[0].block_states.is_homogeneous


def test_chunk_sections_get_above_top_is_none():
    chunk = _sections(1)
    assert chunk.get_relative_block(0, BLOCK_PALETTE_SIZE, 0) is None


def test_chunk_sections_set_above_top_raises():
    chunk = _sections(1)
    with pytest.raises(IndexError):
        chunk.set_relative_block(0, BLOCK_PALETTE_SIZE, 0, BlockStateId(1))


def test_chunk_sections_reject_horizontal_out_of_range():
    chunk = _sections(1)
    with pytest.raises(IndexError):
        chunk.get_relative_block(BLOCK_PALETTE_SIZE, 0, 0)