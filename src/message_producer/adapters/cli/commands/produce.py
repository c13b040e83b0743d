"""``produce``: write the producer message to stdout."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from message_producer.domain.formats import OutputFormat

from ..settings import CONTEXT_SETTINGS
from ..state import current_state

logger = logging.getLogger(__name__)


def render_message(message: str, output_format: OutputFormat) -> str:
    """Format *message* as one line of stdout.

    ``HUMAN`` is the bare message. ``JSON`` is a compact object with a
    single ``message`` key, ready for ``jq``.

    Args:
        message: Text returned by the producer.
        output_format: Requested rendering.

    Returns:
        The line, without a trailing newline.

    Examples:
        >>> render_message("hi", OutputFormat.HUMAN)
        'hi'
        >>> render_message("hi", OutputFormat.JSON)
        '{"message":"hi"}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps({"message": message}).decode()
    return message


@click.command("produce", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OutputFormat.choices(), case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="'human' prints the bare message, 'json' an object with a 'message' key",
)
@click.pass_context
def produce_command(ctx: click.Context, output_format: str) -> None:
    """Print the message of Another Message Producer."""
    state = current_state(ctx)
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="produce", extra={"format": fmt.value, "profile": state.profile}):
        message = state.services.produce()
        logger.debug("Produced a %d character message", len(message))
        click.echo(render_message(message, fmt))


__all__ = ["produce_command", "render_message"]
