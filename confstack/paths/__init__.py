# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Relative path handling for configuration values.

Values written as "./x" or "../x" inside a configuration file are resolved
against the directory of that file, making config files relocatable.

Public API:

- is_relative_path: Check the "./" / "../" anchor rule
- to_absolute_path: Join and normalize against a base directory
- resolve_value: Apply both to a single value
- normalize_tree: Apply resolve_value to every leaf of a tree

Example:
    Basic usage:

        from confstack.paths import normalize_tree

        tree = normalize_tree({"log": "./logs/app.log"}, "/etc/app")
        print(tree["log"])  # "/etc/app/logs/app.log"

"""

from .normalize import normalize_tree
from .resolver import is_relative_path, resolve_value, to_absolute_path

__all__ = ["is_relative_path", "to_absolute_path", "resolve_value", "normalize_tree"]
