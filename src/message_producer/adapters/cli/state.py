"""Per-invocation CLI state and the traceback switches of lib_cli_exit_tools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from message_producer.composition import ProducerServices


@dataclass(frozen=True, slots=True)
class InvocationState:
    """What the root group resolved before handing over to a subcommand.

    Attributes:
        services: Port implementations for this run.
        config: Configuration after ``--profile`` and ``--set`` were applied.
        profile: Profile named on the group, if any.
        overrides: Raw ``--set`` strings. A subcommand that loads another
            profile applies them again.
    """

    services: ProducerServices
    config: Config
    profile: str | None = None
    overrides: tuple[str, ...] = ()


def current_state(ctx: click.Context) -> InvocationState:
    """Return the :class:`InvocationState` the root group stored.

    The lookup walks up the context chain, so it works from any depth.

    Args:
        ctx: Context of the running command.

    Returns:
        The state of this invocation.

    Raises:
        RuntimeError: If the command was invoked without the root group.

    Example:
        >>> ctx = click.Context(click.Command("produce"))
        >>> current_state(ctx)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        RuntimeError: no InvocationState
    """
    state = ctx.find_object(InvocationState)
    if state is None:
        raise RuntimeError("No InvocationState on the Click context; run commands through the root group.")
    return state


class TracebackFlags(NamedTuple):
    """Snapshot of the traceback settings in ``lib_cli_exit_tools.config``."""

    traceback: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackFlags:
        """Read the flags as they are now.

        Example:
            >>> isinstance(TracebackFlags.capture().traceback, bool)
            True
        """
        settings = lib_cli_exit_tools.config
        return cls(bool(settings.traceback), bool(settings.traceback_force_color))

    def restore(self) -> None:
        """Write this snapshot back into ``lib_cli_exit_tools.config``."""
        lib_cli_exit_tools.config.traceback = self.traceback
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def enable_tracebacks(enabled: bool) -> None:
    """Turn full, colored tracebacks in error reports on or off.

    Args:
        enabled: Value of the ``--traceback`` flag.

    Example:
        >>> before = TracebackFlags.capture()
        >>> enable_tracebacks(True)
        >>> TracebackFlags.capture()
        TracebackFlags(traceback=True, force_color=True)
        >>> before.restore()
    """
    TracebackFlags(enabled, enabled).restore()


__all__ = ["InvocationState", "TracebackFlags", "current_state", "enable_tracebacks"]
