"""Console script entry point with production wiring.

Sits at package level so the composition root is wired into the CLI
adapter without the adapter importing it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run ``config-abstractions`` with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
