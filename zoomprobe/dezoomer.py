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
Protocols between the host and the dezoomers.

A `Dezoomer` decides whether it handles an input (its gate) and returns
the zoom levels of the image. Each zoom level is a `TileProvider` that
the host drives batch by batch::

    tiles = provider.next_tiles(None)
    while tiles:
        outcome = fetch_all(tiles)
        tiles = provider.next_tiles(outcome)

An empty batch ends the discovery. Providers must not be called again
afterwards.
"""

from typing import Callable, Optional, Protocol, Sequence

from zoomprobe.exception import NeedsContents, NotApplicable
from zoomprobe.tile import FetchOutcome, TileReference

import logging
log = logging.getLogger('zoomprobe.dezoomer')


class TileProvider(Protocol):
    def next_tiles(self, previous: Optional[FetchOutcome]) -> list[TileReference]:
        """
        Return the next batch of tiles to fetch, given the outcome of the
        previous batch (``None`` for the first call). An empty list means
        that all tiles were returned.
        """
        ...

    def http_headers(self) -> dict[str, str]:
        ...

    def name(self) -> str:
        ...


ZoomLevels = list[TileProvider]


class DezoomerInput(object):
    """
    Input of a dezoomer gate: the URI given by the user and, once fetched
    by the host, its contents.
    """
    def __init__(self, uri: str, contents: Optional[bytes] = None):
        self.uri = uri
        self.contents = contents

    def with_contents(self) -> 'DezoomerInput':
        """
        Returns this input if the contents are available.

        :raises NeedsContents: if the host has to fetch the contents first
        """
        if self.contents is None:
            raise NeedsContents(self.uri)
        return self

    def __repr__(self):
        return '%s(%r, contents=%s)' % (self.__class__.__name__, self.uri,
            'None' if self.contents is None else '<%d bytes>' % len(self.contents))


class Dezoomer(Protocol):
    name: str

    def zoom_levels(self, data: DezoomerInput) -> ZoomLevels:
        """
        :raises NotApplicable: if this dezoomer does not handle `data`
        :raises NeedsContents: if `data` needs to be fetched first
        """
        ...


def single_level(provider: TileProvider) -> ZoomLevels:
    return [provider]


def check(dezoomer_name: str, condition: bool, reason: str) -> None:
    """
    Gate helper. Raises `NotApplicable` if `condition` does not hold.
    """
    if not condition:
        log.debug('%s dezoomer not applicable: %s', dezoomer_name, reason)
        raise NotApplicable(reason)


def apply_to_tiles(provider: TileProvider,
                   fetch: Callable[[Sequence[TileReference]], FetchOutcome]) -> int:
    """
    Drive `provider` until it is exhausted. `fetch` is called with every
    non-empty batch and returns the `FetchOutcome` of that batch.

    Returns the number of fetched batches.
    """
    batches = 0
    tiles = provider.next_tiles(None)
    while tiles:
        outcome = fetch(tiles)
        batches += 1
        log.debug('%s: batch %d, %d of %d tiles fetched', provider.name(),
            batches, outcome.successes, outcome.count)
        tiles = provider.next_tiles(outcome)
    return batches
