"""Logging configuration for token-lint diagnostics."""

import logging
import sys


def configure_logging(verbose: bool = False) -> None:
    """Configure logging once at startup. Report output does not go through here."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
