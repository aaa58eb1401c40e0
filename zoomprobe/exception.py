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


class DezoomerError(Exception):
    pass

class NotApplicable(DezoomerError):
    """
    The dezoomer does not handle this input. Hosts try the next one.
    """
    pass

class NeedsContents(DezoomerError):
    """
    The dezoomer can only decide after the contents of `uri` are fetched.
    """
    def __init__(self, uri):
        DezoomerError.__init__(self, 'contents of %s are required' % (uri, ))
        self.uri = uri

class ConfigurationError(DezoomerError):
    pass

class TileSetError(ConfigurationError):
    pass

class NoDezoomerError(DezoomerError):
    def __init__(self, reasons):
        msg = 'no dezoomer applies: %s' % (
            '; '.join('%s: %s' % (name, reason) for name, reason in reasons)
            or 'no dezoomers configured')
        DezoomerError.__init__(self, msg)
        self.reasons = reasons

class TileDecodeError(DezoomerError):
    pass
