# This file is part of the ZoomProbe project.
# Copyright (C) 2026 ZoomProbe contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import pytest

from zoomprobe.dezoomer import DezoomerInput, apply_to_tiles
from zoomprobe.exception import NotApplicable
from zoomprobe.generic import GenericDezoomer, GenericZoomLevel
from zoomprobe.generic import Init, FirstLine, NextLines
from zoomprobe.tile import FetchOutcome, TileReference, Vec2d


def generic_level(uri):
    levels = GenericDezoomer().zoom_levels(DezoomerInput(uri))
    assert len(levels) == 1
    return levels[0]


def fetch_from(available, tile_size=Vec2d(4, 5), found=None):
    """
    Host stub: tiles with URLs in `available` succeed.
    """
    def fetch(tiles):
        ok = [t for t in tiles if t.url in available]
        if found is not None:
            found.extend(ok)
        return FetchOutcome(len(tiles), len(ok), tile_size if ok else None)
    return fetch


def rectangle(width, height):
    return set('%d,%d' % (x, y) for x in range(width) for y in range(height))


class TestGenericDezoomer(object):

    def test_requires_x_placeholder(self):
        with pytest.raises(NotApplicable):
            GenericDezoomer().zoom_levels(DezoomerInput('http://example.org/0_0.jpg'))

    def test_y_placeholder_only(self):
        with pytest.raises(NotApplicable):
            GenericDezoomer().zoom_levels(DezoomerInput('http://example.org/{{Y}}.jpg'))

    def test_single_level(self):
        level = generic_level('http://example.org/{{X}}_{{Y}}.jpg')
        assert isinstance(level, GenericZoomLevel)
        assert level.name() == 'Generic image with template http://example.org/{{X}}_{{Y}}.jpg'

    def test_default_headers(self):
        level = generic_level('http://example.org/{{X}}_{{Y}}.jpg')
        assert 'User-Agent' in level.http_headers()


class TestGenericZoomLevel(object):

    def test_example_grid(self):
        level = generic_level('{{X}},{{Y}}')
        found = []
        apply_to_tiles(level, fetch_from(
            {'0,0', '1,0', '2,0', '0,1', '1,1', '2,1'}, found=found))
        assert found == [
            TileReference('0,0', Vec2d(0, 0)),
            TileReference('1,0', Vec2d(4, 0)),
            TileReference('2,0', Vec2d(8, 0)),
            TileReference('0,1', Vec2d(0, 5)),
            TileReference('1,1', Vec2d(4, 5)),
            TileReference('2,1', Vec2d(8, 5)),
        ]
        assert level.stage == NextLines(max_x=2, current_y=2)

    @pytest.mark.parametrize('width,height', [
        (1, 1), (1, 4), (4, 1), (3, 3), (7, 2), (2, 9),
    ])
    def test_rectangular_grids(self, width, height):
        level = generic_level('{{X}},{{Y}}')
        found = []
        batches = apply_to_tiles(level, fetch_from(rectangle(width, height), found=found))
        assert len(found) == width * height
        assert set(t.url for t in found) == rectangle(width, height)
        assert level.stage == NextLines(max_x=width - 1, current_y=height)
        # one batch per column of the first row, one per row and the two failing probes
        assert batches == width + (height - 1) + 2

    def test_first_tile_missing(self):
        level = generic_level('{{X}},{{Y}}')
        assert level.next_tiles(None) == [TileReference('0,0', Vec2d(0, 0))]
        assert level.next_tiles(FetchOutcome(1, 0)) == []
        assert level.stage == Init()

    def test_single_tile_sequence(self):
        level = generic_level('{{X}},{{Y}}')
        assert level.next_tiles(None) == [TileReference('0,0', Vec2d(0, 0))]
        assert level.next_tiles(FetchOutcome(1, 1, Vec2d(10, 20))) == [
            TileReference('1,0', Vec2d(10, 0))]
        assert level.stage == FirstLine(current_x=1)
        assert level.next_tiles(FetchOutcome(1, 0)) == [
            TileReference('0,1', Vec2d(0, 20))]
        assert level.stage == NextLines(max_x=0, current_y=1)
        assert level.next_tiles(FetchOutcome(1, 0)) == []

    def test_whole_rows_requested(self):
        level = generic_level('r{{Y}}c{{X}}')
        level.next_tiles(None)
        level.next_tiles(FetchOutcome(1, 1, Vec2d(1, 1)))
        level.next_tiles(FetchOutcome(1, 1, Vec2d(1, 1)))
        row = level.next_tiles(FetchOutcome(1, 0))
        assert [t.url for t in row] == ['r1c0', 'r1c1']
        row = level.next_tiles(FetchOutcome(2, 2, Vec2d(1, 1)))
        assert [t.url for t in row] == ['r2c0', 'r2c1']

    def test_partial_row_ends_discovery(self):
        level = generic_level('{{X}},{{Y}}')
        found = []
        available = rectangle(3, 2) | {'0,2', '1,2'}
        apply_to_tiles(level, fetch_from(available, found=found))
        assert set(t.url for t in found) == rectangle(3, 2) | {'0,2', '1,2'}
        assert level.stage == NextLines(max_x=2, current_y=2)

    def test_tile_size_from_first_tile(self):
        level = generic_level('{{X}},{{Y}}')
        level.next_tiles(None)
        level.next_tiles(FetchOutcome(1, 1, Vec2d(256, 128)))
        tiles = level.next_tiles(FetchOutcome(1, 1, Vec2d(512, 512)))
        assert tiles == [TileReference('2,0', Vec2d(512, 0))]
        tiles = level.next_tiles(FetchOutcome(1, 0, None))
        assert [t.position for t in tiles] == [Vec2d(0, 128), Vec2d(256, 128)]
        assert level.tile_size == Vec2d(256, 128)

    def test_unknown_tile_size(self):
        level = generic_level('{{X}},{{Y}}')
        found = []
        apply_to_tiles(level, fetch_from(rectangle(2, 2), tile_size=None, found=found))
        assert len(found) == 4
        assert all(t.position == Vec2d(0, 0) for t in found)

    def test_host_stops_after_empty_batch(self):
        """
        The result of next_tiles after an empty batch is undefined. Hosts
        stop at the first empty batch and never call the level again.
        """
        level = generic_level('{{X}},{{Y}}')
        # (0,0), (1,0), failing (2,0) and the failing row 1
        assert apply_to_tiles(level, fetch_from(rectangle(2, 1))) == 4
        assert level.stage == NextLines(max_x=1, current_y=1)
