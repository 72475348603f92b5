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

"""JSON source loading for confstack.

This module reads configuration files from disk and turns them into trees.
It also offers a one-shot helper for the common layered setup where several
files are stacked on top of each other:

  - Organization-wide defaults (e.g. /etc/app/org.json)
  - Team or environment overrides (e.g. /etc/app/prod.json)
  - Local overrides (e.g. ./app.local.json)

Later layers win. Relative paths inside each file are resolved against
that file's own directory, so every layer stays relocatable.

Error Handling
--------------
- ConfigFileNotFoundError: The file doesn't exist or is a directory
- ConfigParseError: Invalid UTF-8, invalid JSON, or a top-level value that isn't an object
- All errors are chained with "from err" for better debugging

Example:
    ```python
    from confstack.store import load_layered_config

    cfg = load_layered_config(["/etc/app/org.json", "./app.local.json"])
    print(cfg["database"]["host"])
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import json
import os
from pathlib import Path
from typing import Any

from confstack.exceptions import ConfigFileNotFoundError, ConfigParseError
from confstack.merge import ArrayMode, ConfigTree

__all__ = ["resolve_source_path", "read_json_file", "load_layered_config"]


def resolve_source_path(path: str | os.PathLike[str], working_dir: str | Path) -> Path:
    """Anchors a source path at working_dir and normalizes it.

    Absolute paths are only normalized. Anything else ("./a.json",
    "../a.json" or a bare "a.json") is joined onto working_dir first.

    Args:
        path: Path given by the caller.
        working_dir: Directory that stands in for the process cwd.

    Returns:
        The normalized absolute path. The file is not checked for existence.
    """
    return Path(os.path.normpath(os.path.join(os.fspath(working_dir), os.fspath(path))))


def read_json_file(path: Path) -> ConfigTree:
    """Loads a JSON file and returns the parsed object.

    Args:
        path: Path to the JSON file to load.

    Returns:
        The top-level JSON object as a dict.

    Raises:
        ConfigFileNotFoundError: When the file does not exist or is not a regular file.
        ConfigParseError: On invalid UTF-8, invalid JSON or a non-object top-level value.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Config file at {path} does not exist")
    if not path.is_file():
        raise ConfigFileNotFoundError(f"Config file at {path} is not a file")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise ConfigParseError(f"Error parsing JSON: {path}: {err}") from err
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"top-level JSON must be an object, got {type(data).__name__}: {path}"
        )
    return data


def load_layered_config(
    paths: Iterable[str | os.PathLike[str]],
    *,
    parser: Callable[[ConfigTree], ConfigTree] | None = None,
    array_mode: ArrayMode | bool = ArrayMode.CONCATENATE,
    working_dir: str | Path | None = None,
) -> ConfigTree:
    """Loads and merges several configuration files in order.

    Each file is loaded into a fresh ConfigStore, so the usual pipeline
    applies per layer: read, resolve relative paths against the file's
    directory, run the parser, deep-merge on top of what came before.

    Args:
        paths: Files to load, lowest priority first.
        parser: Optional callback applied to each layer after path resolution.
        array_mode: Array combination policy (or True to replace arrays).
        working_dir: Directory relative source paths are anchored at.
            Defaults to the current working directory.

    Returns:
        The merged configuration tree.

    Raises:
        ConfigFileNotFoundError: If any layer is missing.
        ConfigParseError: If any layer is not a JSON object.
    """
    from confstack.store.store import ConfigStore

    store = ConfigStore(array_mode=array_mode, working_dir=working_dir)
    for p in paths:
        store.load(p, parser)
    return store.get()
