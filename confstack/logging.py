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

"""Logging interface for confstack.

This module provides a configurable logging interface that library modules
can use for output. The logger can be configured globally or passed to a
ConfigStore for better isolation.

The logger supports three output levels:
- Verbose: Only printed when verbose mode is enabled
- Debug: Only printed when debug mode is enabled (implies verbose)
- Warning: Always printed

Example:
    Configure global logger:
        ```python
        from confstack.logging import get_logger, set_global_logger

        logger = get_logger(verbose=True, debug=False)
        set_global_logger(logger)
        ```

    Use in library code:
        ```python
        from confstack.logging import get_global_logger

        logger = get_global_logger()
        logger.verbose("STORE", "Loading /etc/app/base.json")
        logger.debug("MERGE", "Concatenating 2 + 3 array elements")
        ```

    Use with dependency injection:

        store = ConfigStore(logger=get_logger(debug=True))

Note:
    The default logger is silent (verbose=False, debug=False), so library
    functions won't print anything unless explicitly configured.
"""

from __future__ import annotations

from typing import Any, Protocol

import yaml


class Logger(Protocol):
    """Protocol for logger implementations."""

    @property
    def is_debug(self) -> bool:
        """True when debug messages are printed."""
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "STORE", "MERGE").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "PATHS", "MERGE").
            message: Log message.
        """
        ...

    def warning(self, prefix: str, message: str) -> None:
        """Print a warning message.

        Args:
            prefix: Message prefix.
            message: Warning text.
        """
        ...


class DefaultLogger:
    """Default logger implementation that prints to stdout.

    This logger respects verbose and debug flags and prefixes every line
    with its category in square brackets.
    """

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
        """
        self._verbose = verbose or debug
        self._debug = debug

    @property
    def is_debug(self) -> bool:
        return self._debug

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message (only when verbose mode is active)."""
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message (only when debug mode is active)."""
        if self._debug:
            print(f"[{prefix}] {message}")

    def warning(self, prefix: str, message: str) -> None:
        """Print a warning message."""
        print(f"[{prefix}] WARNING: {message}")


class SilentLogger:
    """Logger that suppresses all output.

    Useful for programmatic usage when output is not desired.
    """

    @property
    def is_debug(self) -> bool:
        return False

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass

    def warning(self, prefix: str, message: str) -> None:
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Get a logger instance with specified verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A logger instance configured with the specified verbosity.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Get the global logger instance.

    Returns:
        The current global logger instance.

    Note:
        The default global logger is silent. Use set_global_logger() to
        configure it, or pass a logger instance to ConfigStore directly.
    """
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use as the global logger.

    Note:
        This affects every ConfigStore created without an explicit logger.
        Stores capture the logger at construction time.
    """
    global _global_logger
    _global_logger = logger


def log_tree(logger: Logger, prefix: str, data: Any, indent: int = 0) -> None:
    """Dump a configuration tree as YAML through logger.debug().

    Nothing is serialized unless the logger is in debug mode.

    Args:
        logger: Logger to write through.
        prefix: Message prefix for every line.
        data: Configuration tree to dump.
        indent: Number of spaces to prepend to each line.
    """
    if not logger.is_debug:
        return

    yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():  # Skip empty lines
            logger.debug(prefix, " " * indent + line)
