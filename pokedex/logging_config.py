# pokedex/logging_config.py
import logging

from rich.logging import RichHandler


def setup_logging(level: str = "INFO") -> None:
    """Attach a rich console handler to the root logger.

    Does nothing when the root logger already has handlers, so calling
    it from ``serve`` and from tests is safe.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
    root.addHandler(handler)
