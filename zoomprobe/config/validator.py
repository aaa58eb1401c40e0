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

import json
import os.path
from typing import Iterable

from jsonschema.exceptions import ValidationError
from jsonschema.validators import Draft202012Validator

import logging
log = logging.getLogger('zoomprobe.config')


with open(os.path.join(os.path.dirname(__file__), 'tiles-schema.json')) as schema_file:
    schema = json.load(schema_file)


def get_error_messages(errors: Iterable[ValidationError]) -> list[str]:
    msgs = []
    for error in errors:
        path = error.json_path.replace('$', 'root')
        msgs.append(f'{error.message} in {path}')
        if error.context is not None:
            msgs += get_error_messages(error.context)
    return msgs


def validate(tiles_conf: dict) -> list[str]:
    """
    Validate a tile set document. Returns a list of error messages,
    empty if the document is valid.
    """
    validator = Draft202012Validator(schema=schema)
    errors = get_error_messages(validator.iter_errors(tiles_conf))
    return errors + _validate_variable_names(tiles_conf.get('variables'))


def _validate_variable_names(variables) -> list[str]:
    if not isinstance(variables, list):
        return []
    errors = []
    seen = set()
    for var in variables:
        name = var.get('name') if isinstance(var, dict) else None
        if name is None:
            continue
        if name in seen:
            errors.append(f"duplicate variable '{name}' in root.variables")
        seen.add(name)
    return errors
