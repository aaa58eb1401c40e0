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
Expansion of tile set documents into tile references.

A tile set declares integer variables with inclusive ranges and Jinja2
templates for the tile URL and the pixel position of each tile::

    url_template: "https://example.org/tiles/{{ z }}/{{ x }}_{{ y }}.jpg"
    x_template: "x * 256"
    y_template: "y * 256"
    variables:
      - {name: z, from: 4, to: 4}
      - {name: y, from: 0, to: 9}
      - {name: x, from: 0, to: 14}

Tiles are enumerated over the cartesian product of all variables, with
the first variable outermost.
"""

import itertools
from functools import reduce

from jinja2 import StrictUndefined
from jinja2.exceptions import TemplateError
from jinja2.sandbox import SandboxedEnvironment

from zoomprobe.config import defaults
from zoomprobe.exception import TileSetError
from zoomprobe.tile import TileReference, Vec2d

import logging
log = logging.getLogger('zoomprobe.config')

_env = SandboxedEnvironment(undefined=StrictUndefined, autoescape=False)


class Variable(object):
    """
    Integer variable ranging from `start` to `end` (inclusive).

    >>> list(Variable('x', 0, 4, 2).values())
    [0, 2, 4]
    >>> list(Variable('x', 3, 1, -1).values())
    [3, 2, 1]
    """
    def __init__(self, name, start, end, step=1):
        if step == 0:
            raise TileSetError("step of variable '%s' must not be 0" % name)
        if (end - start) * step < 0:
            raise TileSetError("variable '%s' never reaches %d from %d with step %d"
                % (name, end, start, step))
        self.name = name
        self.start = start
        self.end = end
        self.step = step

    @classmethod
    def from_conf(cls, conf):
        return cls(conf['name'], conf['from'], conf['to'], conf.get('step', 1))

    def values(self):
        if self.step > 0:
            return range(self.start, self.end + 1, self.step)
        return range(self.start, self.end - 1, self.step)

    def count(self):
        """
        Number of values, without building the range.

        >>> Variable('x', 0, 10**20).count()
        100000000000000000001
        """
        return abs(self.end - self.start) // abs(self.step) + 1

    def __repr__(self):
        return '%s(%r, %r, %r, %r)' % (self.__class__.__name__,
            self.name, self.start, self.end, self.step)


class TileSet(object):
    """
    Finite, ordered set of tiles described by templates and variables.
    """
    def __init__(self, url_template, variables, x_template='0', y_template='0'):
        self.variables = variables
        self.url_template = url_template
        try:
            self._url = _env.from_string(url_template)
            self._x = _env.compile_expression(str(x_template), undefined_to_none=False)
            self._y = _env.compile_expression(str(y_template), undefined_to_none=False)
        except TemplateError as ex:
            raise TileSetError('invalid template: %s' % ex)

    @classmethod
    def from_conf(cls, conf):
        variables = [Variable.from_conf(v) for v in conf['variables']]
        return cls(conf['url_template'], variables,
            x_template=conf.get('x_template', '0'),
            y_template=conf.get('y_template', '0'),
        )

    def count(self):
        """
        Number of tiles in the set.
        """
        return reduce(lambda a, b: a * b, (v.count() for v in self.variables), 1)

    def __iter__(self):
        names = [v.name for v in self.variables]
        for values in itertools.product(*(v.values() for v in self.variables)):
            yield self.tile_at(dict(zip(names, values)))

    def tile_at(self, context):
        """
        Return the `TileReference` for one assignment of the variables.
        """
        try:
            url = self._url.render(context)
            x = self._x(**context)
            y = self._y(**context)
        except (TemplateError, ArithmeticError, TypeError, ValueError) as ex:
            raise TileSetError('unable to expand tile for %r: %s' % (context, ex))
        return TileReference(url, Vec2d(_pixel(x, 'x', context), _pixel(y, 'y', context)))

    def expand(self, max_tiles=None):
        """
        Return the list of all tiles.

        :raises TileSetError: if a template fails to evaluate or if the
            set contains more than `max_tiles` tiles
        """
        if max_tiles is None:
            max_tiles = defaults.tile_set['max_tiles']
        num_tiles = self.count()
        if num_tiles > max_tiles:
            raise TileSetError('tile set expands to %d tiles, limit is %d'
                % (num_tiles, max_tiles))
        tiles = list(self)
        log.debug('expanded %s into %d tiles', self.url_template, len(tiles))
        return tiles

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__,
            self.url_template, self.variables)


def _pixel(value, axis, context):
    try:
        if isinstance(value, bool):
            raise TypeError('boolean')
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError('fractional value %r' % value)
            value = int(value)
        value = int(value)
    except (TemplateError, TypeError, ValueError, OverflowError) as ex:
        raise TileSetError('%s position for %r is not an integer: %s' % (axis, context, ex))
    if value < 0:
        raise TileSetError('%s position for %r is negative: %d' % (axis, context, value))
    return value
