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

"""Deep merge engine for configuration trees.

Public API:

- deep_merge: Merge two trees without mutating either
- ArrayMode: Array combination policy (CONCATENATE or REPLACE)
- ConfigTree: Type alias for an object-rooted configuration tree

"""

from .engine import ArrayMode, ConfigTree, deep_merge

__all__ = ["ArrayMode", "ConfigTree", "deep_merge"]
