"""Root logger setup for the datesugar CLI."""

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger.

    Library modules only call ``logging.getLogger(__name__)``; this is called
    once from the CLI entry point. Pass ``force=True`` to reconfigure.
    """
    logging.basicConfig(
        level=level,
        format=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATEFMT,
        force=force,
    )
