"""Target of the ``message-producer`` console script."""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit status."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
