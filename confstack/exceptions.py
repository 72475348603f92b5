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

"""Exception hierarchy for confstack.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors. All exceptions inherit from
ConfStackError, allowing users to catch all confstack errors with a single
except clause if needed.

Each exception also inherits from the closest built-in exception, so code
that already catches FileNotFoundError or ValueError keeps working.

Example:
    Catching specific error types:
        ```python
        from confstack import ConfigStore
        from confstack.exceptions import ConfigFileNotFoundError, ConfigParseError

        store = ConfigStore()
        try:
            store.load("./settings.json")
        except ConfigFileNotFoundError as e:
            print(f"Missing config: {e}")
        except ConfigParseError as e:
            print(f"Broken config: {e}")
        ```

    Catching all confstack errors:
        ```python
        from confstack.exceptions import ConfStackError

        try:
            store.load("./settings.json")
        except ConfStackError as e:
            print(f"confstack error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "ConfStackError",
    "InvalidArgumentError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
]


class ConfStackError(Exception):
    """Base exception for all confstack errors.

    All confstack-specific exceptions inherit from this class, allowing users
    to catch all confstack errors with a single except clause if needed.
    """

    pass


class InvalidArgumentError(ConfStackError, TypeError):
    """Raised when a store is handed a value of the wrong shape.

    This exception is raised when:

    - The default source is neither a tree, a path, nor absent
    - set() is called with something other than a dict
    - A parser callback returns something other than a dict

    Example:
        Catching argument errors:
            ```python
            from confstack import ConfigStore
            from confstack.exceptions import InvalidArgumentError

            try:
                ConfigStore(42)
            except InvalidArgumentError as e:
                print(f"Bad default: {e}")
            ```
    """

    pass


class ConfigFileNotFoundError(ConfStackError, FileNotFoundError):
    """Raised when a configuration file does not exist.

    The message carries the path after resolution against the store's
    working directory, which is the path that was actually checked.
    """

    pass


class ConfigParseError(ConfStackError, ValueError):
    """Raised when a configuration file cannot be turned into a tree.

    This exception is raised when:

    - The file contents are not valid JSON
    - The top-level JSON value is not an object

    The underlying json.JSONDecodeError, if any, is chained as __cause__.
    """

    pass
