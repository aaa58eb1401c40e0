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
Tiles listed by a ``tiles.yaml`` document.
"""

from zoomprobe.config import default_headers, defaults
from zoomprobe.config.tileset import TileSet
from zoomprobe.config.validator import validate
from zoomprobe.dezoomer import check, single_level
from zoomprobe.exception import ConfigurationError
from zoomprobe.util.yaml import load_yaml, YAMLError

import logging
log = logging.getLogger('zoomprobe.config')


class CustomYamlTiles(object):
    """
    Tile provider that returns all tiles of a tile set with the first
    batch and nothing afterwards.
    """
    def __init__(self, tiles, headers=None):
        self.tiles = tuple(tiles)
        self.headers = dict(headers) if headers is not None else default_headers()

    @classmethod
    def from_yaml(cls, doc):
        """
        Create the provider from a YAML document (string, bytes or file).

        :raises ConfigurationError: if the document is invalid or does
            not expand to a valid tile set
        """
        try:
            conf = load_yaml(doc)
        except YAMLError as ex:
            log.error('unable to parse tile set: %s', ex)
            raise ConfigurationError('unable to parse tile set: %s' % ex)
        return cls.from_conf(conf)

    @classmethod
    def from_conf(cls, conf):
        errors = validate(conf)
        if errors:
            for error in errors:
                log.error(error)
            raise ConfigurationError('invalid tile set: %s' % '; '.join(errors))
        try:
            tiles = TileSet.from_conf(conf).expand()
        except ConfigurationError as ex:
            log.error(ex)
            raise
        return cls(tiles, conf.get('headers'))

    def next_tiles(self, previous):
        if previous is not None:
            return []
        return list(self.tiles)

    def http_headers(self):
        return dict(self.headers)

    def name(self):
        return 'Custom tiles'

    def __repr__(self):
        return '%s(<%d tiles>)' % (self.__class__.__name__, len(self.tiles))


class CustomDezoomer(object):
    name = 'custom'

    def zoom_levels(self, data):
        filename = defaults.tile_set['filename']
        check(self.name, data.uri.endswith(filename),
            'URI does not end with %s' % (filename, ))
        contents = data.with_contents().contents
        return single_level(CustomYamlTiles.from_yaml(contents))
