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

"""
Discovery of tiles for URL templates with unknown grid dimensions.

The template contains the placeholders ``{{X}}`` (column) and ``{{Y}}``
(row). The width of the grid is found by requesting the tiles of the first
row one by one, until a tile fails. The height is then found by requesting
complete rows, until a row fails.

Only complete rectangular grids are discovered correctly. A grid with
missing tiles stops at the first row (or column) that is incomplete. A
template without ``{{Y}}`` requests the first row again for every row
and only stops when one of its tiles fails.
"""

from collections import namedtuple

from zoomprobe.config import default_headers, defaults
from zoomprobe.dezoomer import check, single_level
from zoomprobe.tile import TileReference, Vec2d

import logging
log = logging.getLogger('zoomprobe.generic')


Init = namedtuple('Init', [])
FirstLine = namedtuple('FirstLine', ['current_x'])
NextLines = namedtuple('NextLines', ['max_x', 'current_y'])


class GenericZoomLevel(object):
    """
    Tile provider for a single URL template.

    The host must not call `next_tiles` again after it returned an
    empty batch, the result of such a call is undefined.
    """
    def __init__(self, url_template):
        self.url_template = url_template
        self.stage = Init()
        self.tile_size = None

    def tile_url_at(self, x, y):
        return (self.url_template
            .replace(defaults.generic['x_placeholder'], str(x))
            .replace(defaults.generic['y_placeholder'], str(y)))

    def tile_ref_at(self, x, y):
        tile_size = self.tile_size if self.tile_size is not None else Vec2d.zero()
        return TileReference(self.tile_url_at(x, y), Vec2d(x, y) * tile_size)

    def row(self, max_x, y):
        return [self.tile_ref_at(x, y) for x in range(max_x + 1)]

    def next_tiles(self, previous):
        if previous is None:
            return [self.tile_ref_at(0, 0)]

        stage = self.stage
        success = previous.is_success()

        if isinstance(stage, Init):
            if not success:
                log.info('%s: first tile not available', self.url_template)
                return []
            if self.tile_size is None:
                self.tile_size = previous.tile_size
            self.stage = FirstLine(current_x=1)
            log.debug('%s: tile size %s', self.url_template, self.tile_size)
            return [self.tile_ref_at(1, 0)]

        elif isinstance(stage, FirstLine):
            if success:
                self.stage = FirstLine(current_x=stage.current_x + 1)
                return [self.tile_ref_at(self.stage.current_x, 0)]
            max_x = stage.current_x - 1
            self.stage = NextLines(max_x=max_x, current_y=1)
            log.debug('%s: found %d columns', self.url_template, max_x + 1)
            return self.row(max_x, 1)

        elif isinstance(stage, NextLines):
            if success:
                self.stage = NextLines(max_x=stage.max_x, current_y=stage.current_y + 1)
                return self.row(stage.max_x, self.stage.current_y)
            log.info('%s: found %dx%d tiles', self.url_template,
                stage.max_x + 1, stage.current_y)
            return []

        raise AssertionError('unknown stage %r' % (stage, ))

    def http_headers(self):
        return default_headers()

    def name(self):
        return 'Generic image with template %s' % (self.url_template, )

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.url_template)


class GenericDezoomer(object):
    name = 'generic'

    def zoom_levels(self, data):
        placeholder = defaults.generic['x_placeholder']
        check(self.name, placeholder in data.uri,
            'URI does not contain the %s placeholder' % (placeholder, ))
        return single_level(GenericZoomLevel(data.uri))
