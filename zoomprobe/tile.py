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
Value types shared by all dezoomers: grid/pixel vectors, tile references
and the per-batch fetch outcome reported back by the host.
"""

from collections import namedtuple
from io import BytesIO

from PIL import Image

from zoomprobe.exception import TileDecodeError

import logging
log = logging.getLogger('zoomprobe.tile')


class Vec2d(namedtuple('Vec2d', ['x', 'y'])):
    """
    Integer grid coordinate or pixel position.

    Addition and multiplication are component-wise.

    >>> Vec2d(2, 3) * Vec2d(256, 128)
    Vec2d(x=512, y=384)
    >>> Vec2d(2, 3) + Vec2d(1, 1)
    Vec2d(x=3, y=4)
    """
    __slots__ = ()

    @classmethod
    def zero(cls):
        return cls(0, 0)

    def __add__(self, other):
        return Vec2d(self.x + other.x, self.y + other.y)

    def __mul__(self, other):
        return Vec2d(self.x * other.x, self.y * other.y)


class TileReference(namedtuple('TileReference', ['url', 'position'])):
    """
    One retrievable tile and the pixel position of its content in the
    final image.
    """
    __slots__ = ()


class FetchOutcome(object):
    """
    Result of fetching one batch of tiles.

    :param count: number of requested tiles
    :param successes: number of tiles that could be fetched
    :param tile_size: pixel size of a decoded tile, if any tile was decoded
    """
    def __init__(self, count, successes, tile_size=None):
        self.count = count
        self.successes = successes
        self.tile_size = tile_size

    def is_success(self):
        """
        A batch succeeds when it was not empty and every tile was fetched.

        >>> FetchOutcome(3, 3).is_success()
        True
        >>> FetchOutcome(3, 2).is_success()
        False
        >>> FetchOutcome(0, 0).is_success()
        False
        """
        return self.count > 0 and self.successes == self.count

    @classmethod
    def from_payloads(cls, payloads):
        """
        Build the outcome of a batch from the fetched tile payloads.

        `payloads` contains one entry per requested tile, the encoded
        image as bytes or ``None`` when the tile could not be fetched.
        Payloads that are not readable images count as failures.
        """
        count = 0
        successes = 0
        tile_size = None
        for data in payloads:
            count += 1
            if data is None:
                continue
            try:
                size = image_size(data)
            except TileDecodeError as ex:
                log.debug('ignoring tile: %s', ex)
                continue
            successes += 1
            if tile_size is None:
                tile_size = size
        return cls(count, successes, tile_size)

    def __eq__(self, other):
        if not isinstance(other, FetchOutcome):
            return NotImplemented
        return (self.count == other.count and
                self.successes == other.successes and
                self.tile_size == other.tile_size)

    def __repr__(self):
        return '%s(%r, %r, tile_size=%r)' % (self.__class__.__name__,
            self.count, self.successes, self.tile_size)


def image_size(data):
    """
    Return the pixel size of the encoded image `data` as a `Vec2d`.
    Only the image header is read.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            width, height = img.size
    except (OSError, ValueError, Image.DecompressionBombError) as ex:
        raise TileDecodeError('unable to read tile image: %s' % ex)
    return Vec2d(width, height)
