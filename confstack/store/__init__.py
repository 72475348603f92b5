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

"""Configuration store and JSON source loading for confstack.

Public API:

- ConfigStore: Holds a tree, exposes load/merge/get/set/clear/reset
- FromObject, FromPath, Empty: Explicit default source variants
- LoadRecord: One file merged into a store
- load_layered_config: Merge several files in one call
- read_json_file: Read a single JSON object from disk

Example:
    Basic usage:

        from confstack.store import ConfigStore

        store = ConfigStore("./defaults.json")
        store.load("./local.json")
        print(store.get()["log_dir"])  # absolute, relative to local.json

"""

from .loader import load_layered_config, read_json_file, resolve_source_path
from .store import (
    ConfigStore,
    DefaultSource,
    Empty,
    FromObject,
    FromPath,
    LoadRecord,
    Parser,
)

__all__ = [
    "ConfigStore",
    "DefaultSource",
    "Empty",
    "FromObject",
    "FromPath",
    "LoadRecord",
    "Parser",
    "load_layered_config",
    "read_json_file",
    "resolve_source_path",
]
