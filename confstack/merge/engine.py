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

"""Deep merge of configuration trees.

Merge Behavior
--------------
The engine performs deep merging with "incoming wins" semantics:
  - **Dicts**: Recursively merged (keys from incoming override base)
  - **Lists**: Concatenated (base then incoming) or replaced, per ArrayMode
  - **Everything else**: Incoming overwrites base (type mismatches included)

The result never shares containers with either input, so later mutation of
a merged tree cannot leak back into a layer and vice versa.

Example:
    ```python
    from confstack.merge import ArrayMode, deep_merge

    deep_merge({"a": [1]}, {"a": [2]})                     # {"a": [1, 2]}
    deep_merge({"a": [1]}, {"a": [2]}, ArrayMode.REPLACE)  # {"a": [2]}
    ```
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any

__all__ = ["ArrayMode", "ConfigTree", "deep_merge"]

ConfigTree = dict[str, Any]


class ArrayMode(str, Enum):
    """How two arrays at the same position are combined."""

    CONCATENATE = "concatenate"
    REPLACE = "replace"

    @classmethod
    def from_flag(cls, replace_arrays: bool) -> ArrayMode:
        """Maps a boolean "replace arrays" setting onto an ArrayMode.

        Args:
            replace_arrays: True to replace arrays, False to concatenate.

        Returns:
            ArrayMode.REPLACE or ArrayMode.CONCATENATE.
        """
        return cls.REPLACE if replace_arrays else cls.CONCATENATE


def _merge_arrays(base: list[Any], incoming: list[Any], array_mode: ArrayMode) -> list[Any]:
    if array_mode is ArrayMode.REPLACE:
        return copy.deepcopy(incoming)
    return copy.deepcopy(base) + copy.deepcopy(incoming)


def deep_merge(
    base: Any,
    incoming: Any,
    array_mode: ArrayMode = ArrayMode.CONCATENATE,
) -> Any:
    """Deep-merges incoming onto base.

    Rules:

    - dict + dict -> union of keys, shared keys merged recursively
    - list + list -> base + incoming (CONCATENATE) or incoming (REPLACE)
    - everything else -> incoming overwrites base

    Keys keep base order, with keys new in incoming appended in their own
    order. This function does not mutate inputs; returns a new tree.

    Args:
        base: The existing tree (lower priority).
        incoming: The tree being layered on top (higher priority).
        array_mode: Array combination policy.

    Returns:
        A new tree with the merged contents.
    """
    if isinstance(base, dict) and isinstance(incoming, dict):
        result: dict[str, Any] = {}
        for k, v in base.items():
            if k in incoming:
                result[k] = deep_merge(v, incoming[k], array_mode)
            else:
                result[k] = copy.deepcopy(v)
        for k, v in incoming.items():
            if k not in base:
                result[k] = copy.deepcopy(v)
        return result

    if isinstance(base, list) and isinstance(incoming, list):
        return _merge_arrays(base, incoming, array_mode)

    # Type mismatch or scalar on either side: last write wins
    return copy.deepcopy(incoming)
