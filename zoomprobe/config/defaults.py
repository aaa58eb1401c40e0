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

from zoomprobe.version import version

http = dict(
    headers = {
        'User-Agent': 'ZoomProbe/%s' % (version, ),
        'Accept': 'image/webp,image/png,image/jpeg,image/*;q=0.8,*/*;q=0.5',
    },
)

tile_set = dict(
    # refuse tile sets that expand to more tiles than this
    max_tiles = 1000000,
    # filename the custom dezoomer is looking for
    filename = 'tiles.yaml',
)

generic = dict(
    x_placeholder = '{{X}}',
    y_placeholder = '{{Y}}',
)
