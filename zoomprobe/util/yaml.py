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

import yaml

class YAMLError(Exception):
    pass

def load_yaml_file(file_or_filename):
    """
    Load a tile set document from a file object or filename.
    """
    if isinstance(file_or_filename, (str, bytes)):
        with open(file_or_filename, 'rb') as f:
            return load_yaml(f)
    return load_yaml(file_or_filename)

def load_yaml(doc):
    """
    Load a YAML mapping from a string, bytes or a file object.

    >>> load_yaml(b'url_template: http://example.org/{{x}}.jpg')
    {'url_template': 'http://example.org/{{x}}.jpg'}
    """
    if isinstance(doc, bytes):
        try:
            doc = doc.decode('utf-8')
        except UnicodeDecodeError as ex:
            raise YAMLError('document is not UTF-8 encoded: %s' % ex)
    try:
        data = yaml.safe_load(doc)
    except yaml.YAMLError as ex:
        raise YAMLError(str(ex))
    if not isinstance(data, dict):
        raise YAMLError('document is not a YAML dictionary')
    return data
