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

"""Relative path detection and resolution.

A configuration value counts as a relative path only when it is written with
an explicit leading anchor:

  - "./sub/file.txt"   -> relative
  - "../shared/x.json" -> relative
  - ".hidden", "..", ".", "/abs", "x/./y", "https://..." -> left alone

Bare words such as "cache/dir" are deliberately NOT treated as paths; there
is no way to tell them apart from ordinary strings.

Resolution is pure string algebra: the value is joined onto the base
directory and normalized. The filesystem is never consulted.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

__all__ = ["is_relative_path", "to_absolute_path", "resolve_value"]


def is_relative_path(value: Any) -> bool:
    """Returns True if value is a string anchored with "./" or "../".

    Args:
        value: Any configuration value. Non-strings are never relative.

    Returns:
        True when the first characters are exactly "./" or "../".

    Example:
        ```python
        is_relative_path("./x")   # True
        is_relative_path("../x")  # True
        is_relative_path(".x")    # False
        is_relative_path("..")    # False
        ```
    """
    if not isinstance(value, str):
        return False
    return value[:2] == "./" or value[:3] == "../"


def to_absolute_path(relative: str, base_dir: str | os.PathLike[str]) -> str:
    """Joins relative onto base_dir and normalizes the result.

    Collapses "." and ".." segments and redundant separators. No existence
    check is performed and symlinks are not followed.

    Args:
        relative: Path to anchor. Absolute input ignores base_dir.
        base_dir: Directory the path is relative to.

    Returns:
        The normalized path as a string.
    """
    return os.path.normpath(os.path.join(os.fspath(base_dir), relative))


def resolve_value(value: Any, base_dir: str | Path) -> Any:
    """Rewrites value to an absolute path if it looks relative.

    Args:
        value: Scalar configuration value.
        base_dir: Directory relative paths are anchored at.

    Returns:
        The absolute path for relative-looking strings, otherwise value
        unchanged (same object).
    """
    if is_relative_path(value):
        return to_absolute_path(value, base_dir)
    return value
