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

"""Tree normalization for configuration values.

Walks a JSON-shaped tree and passes every scalar leaf through
resolve_value(). The result is a new tree of identical shape; the input is
never modified. Keys are never rewritten, only values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .resolver import resolve_value

__all__ = ["normalize_tree"]


def normalize_tree(tree: Any, base_dir: str | Path) -> Any:
    """Returns a copy of tree with relative-path strings made absolute.

    Rules:

    - dict -> new dict, same keys, values normalized
    - list -> new list, every element normalized as its own sub-tree
    - scalar -> resolve_value(scalar, base_dir)

    Args:
        tree: Configuration tree (or any sub-tree or scalar).
        base_dir: Directory relative values are anchored at.

    Returns:
        A new tree of the same shape.
    """
    if isinstance(tree, dict):
        return {key: normalize_tree(value, base_dir) for key, value in tree.items()}
    if isinstance(tree, list):
        return [normalize_tree(item, base_dir) for item in tree]
    return resolve_value(tree, base_dir)
