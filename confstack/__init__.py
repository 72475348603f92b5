"""
confstack - layered JSON configuration

A small library for building one configuration tree out of several JSON
sources.

confstack provides:
  - Deep merging of configuration layers (later layers win)
  - Per-store array policy: concatenate or replace
  - Relative path values ("./x", "../x") resolved against their source file
  - Resettable defaults, from an in-memory tree or a file re-read from disk

Quick Start
-----------
    from confstack import ConfigStore

    store = ConfigStore("/etc/app/defaults.json")
    store.load("./app.local.json")
    cfg = store.get()

Package Structure
-----------------
store : package
    ConfigStore and JSON file loading.
merge : package
    Deep merge engine and ArrayMode.
paths : package
    Relative path detection and tree normalization.
exceptions : module
    ConfStackError and its subclasses.
logging : module
    Pluggable verbose/debug/warning logger.

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Layered JSON configuration with deep merge and relative path resolution"

from confstack.exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfStackError,
    InvalidArgumentError,
)
from confstack.merge import ArrayMode, deep_merge
from confstack.paths import is_relative_path, normalize_tree, to_absolute_path
from confstack.store import (
    ConfigStore,
    Empty,
    FromObject,
    FromPath,
    load_layered_config,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "ConfigStore",
    "FromObject",
    "FromPath",
    "Empty",
    "ArrayMode",
    "deep_merge",
    "normalize_tree",
    "is_relative_path",
    "to_absolute_path",
    "load_layered_config",
    "ConfStackError",
    "InvalidArgumentError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
]
