"""The ``message-producer`` command group.

The group resolves everything a subcommand needs before it runs: the
services, the configuration after ``--profile`` and ``--set``, and a
started logging runtime. Subcommands read the result through
:func:`~message_producer.adapters.cli.state.current_state`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from message_producer import __init__conf__
from message_producer.adapters.config.loader import check_profile
from message_producer.adapters.config.overrides import merge_overrides

from .commands import config_command, info_command, produce_command
from .settings import CONTEXT_SETTINGS
from .state import InvocationState, enable_tracebacks

if TYPE_CHECKING:
    from message_producer.composition import ProducerServices

def _resolve_config(services: ProducerServices, profile: str | None, overrides: tuple[str, ...]) -> Config:
    """Load *profile* and apply *overrides*, reporting bad input as usage errors.

    Raises:
        click.BadParameter: If the profile name or an override is malformed.
    """
    if profile is not None:
        try:
            check_profile(profile)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="'--profile'") from exc
    config = services.load_config(profile=profile)
    try:
        return merge_overrides(config, overrides)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--set'") from exc

@click.group(help=__init__conf__.title, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full traceback when a command fails")
@click.option("--profile", metavar="NAME", default=None, help="Read configuration from profile NAME")
@click.option(
    "--set",
    "overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; JSON values are decoded (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, overrides: tuple[str, ...]) -> None:
    """Resolve configuration, start logging and pass both to the subcommand.

    ``ctx.obj`` must hold a zero-argument callable returning
    :class:`~message_producer.composition.ProducerServices`. The group
    swaps it for an :class:`InvocationState`. Without a subcommand the
    help text is printed.

    Args:
        ctx: Click context; ``ctx.obj`` is the services factory.
        traceback: Print full tracebacks on failure.
        profile: Optional configuration profile.
        overrides: Raw ``--set`` assignments in command-line order.

    Raises:
        RuntimeError: If ``ctx.obj`` is not a services factory.
        click.BadParameter: For an invalid profile name or ``--set`` value.

    Example:
        >>> from click.testing import CliRunner
        >>> from message_producer.composition import build_production
        >>> result = CliRunner().invoke(cli, ["produce"], obj=build_production)
        >>> result.stdout
        'Hello World from Another Message Producer\\n'
    """
    enable_tracebacks(traceback)
    if not callable(ctx.obj):
        raise RuntimeError("cli expects a services factory in ctx.obj, got %r" % (ctx.obj,))
    services: ProducerServices = ctx.obj()
    config = _resolve_config(services, profile, overrides)
    services.start_logging(config)
    ctx.obj = InvocationState(services=services, config=config, profile=profile, overrides=overrides)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())

cli.add_command(produce_command)
cli.add_command(info_command)
cli.add_command(config_command)

__all__ = ["cli"]
