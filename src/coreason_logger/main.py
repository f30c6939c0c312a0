# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import os
import signal
import sys
from typing import Annotated, Any, Dict, List, Optional

import typer
from loguru import logger

from coreason_logger import __version__
from coreason_logger.logger import Logger
from coreason_logger.severity import Severity

app = typer.Typer(
    name="coreason-logger",
    help="CLI for coreason-logger: leveled console and syslog logging.",
    add_completion=False,
)


@app.command()
def emit(
    level: Annotated[str, typer.Argument(help="Severity of the message (error, warn, info, debug, trace, silly)")],
    message: Annotated[str, typer.Argument(help="Message template, printf-style")],
    args: Annotated[Optional[List[str]], typer.Argument(help="Values substituted into the template")] = None,
    prefix: Annotated[Optional[List[str]], typer.Option("--prefix", "-p", help="Prefix segment (repeatable)")] = None,
    transport: Annotated[Optional[str], typer.Option("--transport", "-t", help="console or syslog")] = None,
    syslog_tag: Annotated[Optional[str], typer.Option("--syslog-tag", help="Syslog tag")] = None,
    syslog_path: Annotated[Optional[str], typer.Option("--syslog-path", help="Syslog socket path")] = None,
    threshold: Annotated[Optional[str], typer.Option("--level", "-l", help="Threshold level")] = None,
) -> None:
    """
    Emit a single log message.
    """
    options: Dict[str, Any] = {
        "prefixes": prefix or [],
        "transport": transport,
        "syslog_tag": syslog_tag,
        "level": threshold,
    }
    if syslog_path:
        options["syslog_path"] = syslog_path

    try:
        severity = Severity.parse(level)
        with Logger(**options) as log:
            log.log(severity, message, args or [])
    except Exception:
        logger.exception("Emit Failed")
        sys.exit(1)


@app.command()
def cycle(pid: Annotated[int, typer.Argument(help="Process to signal")]) -> None:
    """
    Advance the log level of a running process by sending it SIGUSR2.
    """
    signum = getattr(signal, "SIGUSR2", None)
    if signum is None:
        logger.error("SIGUSR2 is not supported on this platform")
        sys.exit(1)
    try:
        os.kill(pid, signum)
    except OSError:
        logger.exception(f"Failed to signal process {pid}")
        sys.exit(1)
    typer.echo(f"Sent SIGUSR2 to {pid}")


@app.command()
def levels() -> None:
    """List the severity scale, most severe first."""
    for severity in Severity:
        typer.echo(f"{int(severity)}\t{severity.label}")


def _emit_all_levels(*loggers: Logger) -> None:
    for index, level in enumerate(Logger.LEVELS):
        for log in loggers:
            log.log(level, "Level: %s", [index])


@app.command()
def demo(
    threshold: Annotated[str, typer.Option("--level", "-l", help="Threshold level")] = "silly",
) -> None:
    """
    Walk every level through a root logger, a prefixed child and two sibling children.
    """

    def basic() -> None:
        with Logger(transport="console", level=threshold) as log:
            _emit_all_levels(log)

    def basic_with_prefix() -> None:
        with Logger(prefix="@coreason", transport="console", level=threshold) as root:
            with root.create_child(prefix="core") as log:
                _emit_all_levels(log)

    def multiple_child_loggers() -> None:
        with Logger(prefix="@coreason", transport="console", level=threshold) as root:
            with root.create_child(prefix="core") as log, root.create_child(prefix="test") as log2:
                _emit_all_levels(log, log2)

    try:
        for walkthrough in (basic, basic_with_prefix, multiple_child_loggers):
            typer.echo(f"Title: {walkthrough.__name__}")
            walkthrough()
            typer.echo("")
    except Exception:
        logger.exception("Demo Failed")
        sys.exit(1)


@app.command()
def version() -> None:
    """Print the version of coreason-logger."""
    typer.echo(f"coreason-logger v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
