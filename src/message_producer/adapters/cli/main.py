"""Run the command group and turn its outcome into an exit status."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from message_producer import __init__conf__

from .settings import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .state import TracebackFlags

if TYPE_CHECKING:
    from message_producer.composition import ProducerServices


def _report_failure(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return its exit status.

    The report is a one-line summary unless ``--traceback`` was given.
    """
    verbose = TracebackFlags.capture().traceback
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], ProducerServices] | None = None,
    restore_traceback: bool = True,
) -> int:
    """Run ``message-producer`` and return the exit status instead of exiting.

    Click runs with ``standalone_mode=False`` so the services factory can
    travel in ``obj``. Usage errors print Click's message and return 2.
    Any other exception is reported by lib_cli_exit_tools.

    Args:
        argv: Arguments after the program name. ``sys.argv[1:]`` if None.
        services_factory: Zero-argument callable building the services,
            normally :func:`message_producer.composition.build_production`.
        restore_traceback: Reset the traceback flags to their values
            before the call once the run is over.

    Returns:
        The process exit status.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from message_producer.composition import build_production
        >>> main(["produce"], services_factory=build_production)
        Hello World from Another Message Producer
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass composition.build_production")

    from .root import cli

    args = list(sys.argv[1:] if argv is None else argv)
    flags = TracebackFlags.capture()
    try:
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        # Without standalone mode ctx.exit() and --help hand back their status.
        return outcome if isinstance(outcome, int) else 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_failure(exc)
    finally:
        if restore_traceback:
            flags.restore()
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
