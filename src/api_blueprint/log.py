import logging


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for command line runs."""

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
