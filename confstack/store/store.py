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

"""Configuration store implementation for confstack.

The store holds one object-rooted configuration tree and grows it through a
sequence of merges. Every load runs the same pipeline:

  1. Resolve the source path against the store's working directory
  2. Read and parse the JSON file
  3. Rewrite "./" and "../" values relative to the file's directory
  4. Hand the result to the optional parser callback
  5. Deep-merge onto the current tree using the store's ArrayMode

Default Sources
---------------
A store can remember a default that reset() restores:

  - FromObject(tree): an in-memory tree; reset() restores a fresh copy
  - FromPath(path):   a file; reset() re-reads it from disk
  - Empty():          nothing; reset() leaves the store empty

Plain values are accepted too: a dict means FromObject, a str or PathLike
means FromPath, None means Empty.

Example:
    ```python
    from confstack import ArrayMode, ConfigStore

    store = ConfigStore("/etc/app/defaults.json", array_mode=ArrayMode.REPLACE)
    store.load("./app.local.json")
    store.merge({"debug": True})

    cfg = store.get()  # live reference, mutations affect the store
    frozen = store.snapshot()  # independent copy

    store.reset()  # back to whatever defaults.json says now
    ```
"""

from __future__ import annotations

from collections.abc import Callable
import copy
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

from confstack.exceptions import InvalidArgumentError
from confstack.logging import Logger, get_global_logger, log_tree
from confstack.merge import ArrayMode, ConfigTree, deep_merge
from confstack.paths import normalize_tree

from .loader import read_json_file, resolve_source_path

__all__ = [
    "ConfigStore",
    "DefaultSource",
    "Empty",
    "FromObject",
    "FromPath",
    "LoadRecord",
    "Parser",
]

Parser = Callable[[ConfigTree], ConfigTree]


# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class FromObject:
    """Default source backed by an in-memory tree."""

    tree: ConfigTree


@dataclass(frozen=True)
class FromPath:
    """Default source backed by a JSON file, re-read on every reset()."""

    path: str | os.PathLike[str]


@dataclass(frozen=True)
class Empty:
    """No default source."""


DefaultSource = FromObject | FromPath | Empty


@dataclass(frozen=True)
class LoadRecord:
    """
    One file merged into a store.
    Useful for debugging and logging.
    """

    path: Path
    base_dir: Path


def _coerce_default(default: Any) -> DefaultSource:
    """Maps a constructor argument onto a DefaultSource variant.

    Raises:
        InvalidArgumentError: For anything that isn't a tree, a path or None.
    """
    if isinstance(default, (FromObject, FromPath, Empty)):
        source = default
    elif default is None:
        source = Empty()
    elif isinstance(default, dict):
        source = FromObject(default)
    elif isinstance(default, (str, os.PathLike)):
        # An empty path means "no default", same as None
        source = FromPath(default) if os.fspath(default) else Empty()
    else:
        raise InvalidArgumentError(
            "default source must be a dict, a path or None, "
            f"got {type(default).__name__}"
        )

    if isinstance(source, FromObject):
        if not isinstance(source.tree, dict):
            raise InvalidArgumentError(
                f"default tree must be a dict, got {type(source.tree).__name__}"
            )
        # Private copy; reset() restores from this, never from the caller's dict
        source = FromObject(copy.deepcopy(source.tree))
    return source


def _coerce_array_mode(array_mode: Any) -> ArrayMode:
    if isinstance(array_mode, bool):
        return ArrayMode.from_flag(array_mode)
    try:
        return ArrayMode(array_mode)
    except ValueError as err:
        raise InvalidArgumentError(f"unknown array mode: {array_mode!r}") from err


# -------------------------------
# Store
# -------------------------------


class ConfigStore:
    """Holds a configuration tree built from a sequence of merges.

    Attributes:
        array_mode: Array policy applied to every merge, fixed at construction.
        working_dir: Directory that relative source paths are anchored at.
        default: The remembered default source.
        sources: Files merged since the last clear(), oldest first.

    Note:
        get() returns the live tree. Anything done to it is done to the
        store; use snapshot() for an independent copy.
    """

    def __init__(
        self,
        default: DefaultSource | ConfigTree | str | os.PathLike[str] | None = None,
        parser: Parser | None = None,
        array_mode: ArrayMode | bool = ArrayMode.CONCATENATE,
        *,
        working_dir: str | os.PathLike[str] | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the store and apply the default source.

        Args:
            default: Default source (FromObject/FromPath/Empty, dict, path or None).
            parser: Callback applied to the default file's tree, both now
                and on every reset().
            array_mode: ArrayMode, or a bool where True means REPLACE.
            working_dir: Stand-in for the process cwd. Captured from
                Path.cwd() when omitted.
            logger: Logger to use. Defaults to the global logger.

        Raises:
            InvalidArgumentError: If default or array_mode has the wrong type.
            ConfigFileNotFoundError: If a default path does not exist.
            ConfigParseError: If a default file is not a JSON object.
        """
        self._logger = logger if logger is not None else get_global_logger()
        self._array_mode = _coerce_array_mode(array_mode)
        self._working_dir = Path(working_dir) if working_dir is not None else Path.cwd()
        self._default = _coerce_default(default)
        self._default_parser = parser
        self._config: ConfigTree = {}
        self._sources: list[LoadRecord] = []

        if isinstance(self._default, FromObject):
            self._config = copy.deepcopy(self._default.tree)
        elif isinstance(self._default, FromPath):
            self.load(self._default.path, parser)

    @classmethod
    def from_object(cls, tree: ConfigTree, **kwargs: Any) -> ConfigStore:
        """Creates a store whose default is an in-memory tree."""
        return cls(FromObject(tree), **kwargs)

    @classmethod
    def from_path(
        cls, path: str | os.PathLike[str], parser: Parser | None = None, **kwargs: Any
    ) -> ConfigStore:
        """Creates a store whose default is a JSON file, loaded immediately."""
        return cls(FromPath(path), parser, **kwargs)

    @classmethod
    def empty(cls, **kwargs: Any) -> ConfigStore:
        """Creates a store with no default."""
        return cls(Empty(), **kwargs)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(default={self._default!r}, "
            f"array_mode={self._array_mode.value!r}, keys={list(self._config)!r})"
        )

    # -------------------------------
    # Properties
    # -------------------------------

    @property
    def array_mode(self) -> ArrayMode:
        return self._array_mode

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    @property
    def default(self) -> DefaultSource:
        return self._default

    @property
    def sources(self) -> tuple[LoadRecord, ...]:
        return tuple(self._sources)

    # -------------------------------
    # State access
    # -------------------------------

    def get(self) -> ConfigTree:
        """Returns the current tree by reference."""
        return self._config

    def snapshot(self) -> ConfigTree:
        """Returns a deep copy of the current tree."""
        return copy.deepcopy(self._config)

    def set(self, config: ConfigTree) -> None:
        """Replaces the current tree wholesale. No merge, no path resolution.

        Raises:
            InvalidArgumentError: If config is not a dict.
        """
        if not isinstance(config, dict):
            raise InvalidArgumentError(
                f"configuration must be a dict, got {type(config).__name__}"
            )
        self._config = config

    def clear(self) -> None:
        """Drops every property and forgets which files were loaded."""
        self._config = {}
        self._sources = []

    def reset(self) -> None:
        """Restores the default source.

        Path defaults are re-read from disk, so edits to the default file
        since construction are picked up. Object defaults are restored from
        a private copy taken at construction.

        Raises:
            ConfigFileNotFoundError: If the default file has since been removed.
            ConfigParseError: If the default file is no longer valid.
        """
        self.clear()
        if isinstance(self._default, FromPath):
            self._logger.verbose("STORE", "Resetting to default file")
            self.load(self._default.path, self._default_parser)
        elif isinstance(self._default, FromObject):
            self._logger.verbose("STORE", "Resetting to default tree")
            self._config = copy.deepcopy(self._default.tree)

    # -------------------------------
    # Loading and merging
    # -------------------------------

    def load(self, path: str | os.PathLike[str], parser: Parser | None = None) -> ConfigTree:
        """Reads a JSON file and merges it onto the current tree.

        Relative values inside the file ("./x", "../x") are resolved
        against the directory containing the file.

        Args:
            path: File to load. Non-absolute paths are anchored at working_dir.
            parser: Optional callback applied after path resolution.

        Returns:
            The new current tree.

        Raises:
            ConfigFileNotFoundError: If the file does not exist or is not a file.
            ConfigParseError: On invalid UTF-8, invalid JSON or a non-object
                top-level value.

        Note:
            A file holding an empty object is merged as usual and reported
            through logger.warning().
        """
        resolved = resolve_source_path(path, self._working_dir)
        self._logger.verbose("STORE", f"Loading: {resolved}")

        tree = read_json_file(resolved)
        if not tree:
            self._logger.warning("STORE", f"Config file at {resolved} has no properties")
        self._logger.debug("STORE", f"--- Content from {resolved.name} ---")
        log_tree(self._logger, "STORE", tree)

        result = self.merge(tree, parser, resolved.parent)
        self._sources.append(LoadRecord(path=resolved, base_dir=resolved.parent))
        return result

    read = load

    def merge(
        self,
        config: ConfigTree,
        parser: Parser | None = None,
        base_dir: str | os.PathLike[str] | None = None,
    ) -> ConfigTree:
        """Merges a tree onto the current tree.

        Args:
            config: Tree to merge. Not modified.
            parser: Optional callback. Receives the path-resolved tree and
                returns the full replacement tree to merge.
            base_dir: Directory relative values are anchored at. Defaults
                to working_dir.

        Returns:
            The new current tree.

        Raises:
            InvalidArgumentError: If the tree to merge (after the parser) is
                not a dict.
        """
        anchor = Path(base_dir) if base_dir is not None else self._working_dir
        add = normalize_tree(config, anchor)

        if parser is not None:
            add = parser(add)

        if not isinstance(add, dict):
            raise InvalidArgumentError(
                f"configuration to merge must be a dict, got {type(add).__name__}"
            )

        self._config = deep_merge(self._config, add, self._array_mode)

        top_level_keys = list(self._config.keys())
        self._logger.verbose(
            "MERGE",
            (
                f"Merged {len(add)} key(s) ({self._array_mode.value} arrays); "
                f"config has {len(top_level_keys)} top-level keys: "
                f"{', '.join(top_level_keys)}"
            ),
        )
        self._logger.debug("MERGE", "--- Merged Configuration ---")
        log_tree(self._logger, "MERGE", self._config)
        return self._config
