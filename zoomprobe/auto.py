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
Automatic selection of the dezoomer for an input.
"""

from zoomprobe.custom_yaml import CustomDezoomer
from zoomprobe.exception import (ConfigurationError, DezoomerError,
    NoDezoomerError, NotApplicable)
from zoomprobe.generic import GenericDezoomer

import logging
log = logging.getLogger('zoomprobe.dezoomer')


def all_dezoomers():
    """
    Returns a new instance of every known dezoomer, in the order they
    are tried.
    """
    return [CustomDezoomer(), GenericDezoomer()]


def dezoomer_by_name(name):
    for dezoomer in all_dezoomers():
        if dezoomer.name == name:
            return dezoomer
    raise DezoomerError('unknown dezoomer %r' % (name, ))


def zoom_levels(data, dezoomers=None):
    """
    Return the zoom levels of the first dezoomer that accepts `data`.

    :raises NeedsContents: if a dezoomer needs the contents of the URI,
        call again with the fetched contents
    :raises NoDezoomerError: if no dezoomer accepts `data`, the reasons
        include configuration errors of dezoomers that applied but failed
    """
    if dezoomers is None:
        dezoomers = all_dezoomers()
    reasons = []
    for dezoomer in dezoomers:
        try:
            levels = dezoomer.zoom_levels(data)
        except NotApplicable as ex:
            reasons.append((dezoomer.name, str(ex)))
            continue
        except ConfigurationError as ex:
            log.warning('%s dezoomer failed for %s: %s', dezoomer.name, data.uri, ex)
            reasons.append((dezoomer.name, str(ex)))
            continue
        log.debug('using %s dezoomer for %s', dezoomer.name, data.uri)
        return levels
    raise NoDezoomerError(reasons)
