"""Console output for radix64's own log records.

The library only emits records through module loggers under the
``radix64`` namespace (alphabet replacement at DEBUG, duplicate alphabet
symbols at WARNING, issued tokens at DEBUG) and installs no handlers by
default. `enable_console_logging` attaches a Rich handler to that
namespace so those records show up on the console, tagged with the
submodule that produced them; `disable_console_logging` takes it off
again.
"""

from __future__ import annotations

import logging
from typing import Literal, TextIO, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "radix64"
HANDLER_NAME = "radix64-console"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ComponentFilter(logging.Filter):
    """Set ``record.component`` to the emitting submodule.

    ``"radix64.codec"`` becomes ``"codec"``; records from the package
    logger itself keep ``"radix64"``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.component = (
            record.name.removeprefix(LOGGER_NAME).lstrip(".") or LOGGER_NAME
        )
        return True


def _installed_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


def enable_console_logging(
    level: int = logging.WARNING,
    color: bool = True,
    stream: TextIO | None = None,
) -> RichHandler:
    """Route the ``radix64`` logger namespace to a Rich console handler.

    Calling it again does not add a second handler; the installed one is
    returned with its level updated.

    Args:
        level: Minimum level to display; also applied to the ``radix64``
            logger so DEBUG records are not dropped before the handler.
        color: Enable color output when True.
        stream: Write here instead of stderr.

    Returns:
        RichHandler: The handler attached to the ``radix64`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if installed := _installed_handlers(logger):
        handler = installed[0]
        handler.setLevel(level)
        return handler  # type: ignore[return-value]

    color_system: ColorSystem | None = "auto" if color else None
    if stream is None:
        console = Console(color_system=color_system, stderr=True)
    else:
        console = Console(color_system=color_system, file=stream)

    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt="%(component)s: %(message)s"))
    handler.addFilter(ComponentFilter())
    logger.addHandler(handler)
    return handler


def disable_console_logging() -> bool:
    """Detach the console handler and reset the ``radix64`` logger level.

    Returns:
        bool: True if a handler was removed.
    """
    logger = logging.getLogger(LOGGER_NAME)
    installed = _installed_handlers(logger)
    for handler in installed:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    return bool(installed)
