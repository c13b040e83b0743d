"""Click settings and traceback budgets shared across the CLI."""

from __future__ import annotations

from typing import Any, Final

#: Applied to the group and every command.
CONTEXT_SETTINGS: Final[dict[str, Any]] = {"help_option_names": ["-h", "--help"]}

#: Characters of an error report shown without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
#: Characters of an error report shown with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = ["CONTEXT_SETTINGS", "TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT"]
