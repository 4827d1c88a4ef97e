"""vestledger command: print vested balances per employee+award as of a date.

    vestledger LEDGER TARGET_DATE [--ledger-dir DIR] [--log-level LEVEL] [--log-format FMT]

Exit status 0 after a completed run (even one that publishes nothing),
2 when an argument fails validation.
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

import typer

from vestledger.core.result import Err, Ok
from vestledger.gateway.invocation import validate_ledger_name, validate_target_date
from vestledger.infra.config import ENV_LEDGER_DIR, ENV_LOG_FORMAT, ENV_LOG_LEVEL, load_config
from vestledger.infra.file_adapter import CsvFileLedgerSource, StreamPublisher
from vestledger.infra.logger import get_logger, setup_logging
from vestledger.workflow.snapshot import SnapshotService

EXIT_INVALID_INVOCATION = 2

app = typer.Typer(
    name="vestledger",
    help="Replay an equity-vesting ledger into per-award vested balances.",
    add_completion=False,
)


@app.command()
def snapshot(
    ledger: str = typer.Argument(..., help="Ledger file name (.csv) inside the ledger directory"),
    target_date: str = typer.Argument(..., help="As-of date, YYYY-MM-DD"),
    ledger_dir: Path | None = typer.Option(
        None, "--ledger-dir", "-d", help="Directory holding ledgers [env: VESTLEDGER_LEDGER_DIR]",
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR [env: VESTLEDGER_LOG_LEVEL]",
    ),
    log_format: str | None = typer.Option(
        None, "--log-format", help="console or json [env: VESTLEDGER_LOG_FORMAT]",
    ),
) -> None:
    """Compute the vested-share snapshot for LEDGER as of TARGET_DATE."""
    # Flags take precedence over the environment and go through the same checks.
    environ = dict(os.environ)
    for name, value in (
        (ENV_LEDGER_DIR, ledger_dir), (ENV_LOG_LEVEL, log_level), (ENV_LOG_FORMAT, log_format),
    ):
        if value is not None:
            environ[name] = str(value)

    match load_config(environ):
        case Err(error):
            typer.echo(f"Input Validation Error: {error.message}", err=True)
            raise typer.Exit(code=EXIT_INVALID_INVOCATION)
        case Ok(config):
            pass

    setup_logging(config.log_level, config.log_format)
    logger = get_logger(__name__)

    match validate_ledger_name(ledger, config):
        case Err(error):
            logger.error("invalid_invocation", **error.to_dict())
            typer.echo(f"Input Validation Error: {error.message}", err=True)
            raise typer.Exit(code=EXIT_INVALID_INVOCATION)
        case Ok(name):
            pass

    match validate_target_date(target_date):
        case Err(error):
            logger.error("invalid_invocation", **error.to_dict())
            typer.echo(f"Input Validation Error: {error.message}", err=True)
            raise typer.Exit(code=EXIT_INVALID_INVOCATION)
        case Ok(as_of):
            pass

    service = SnapshotService(
        CsvFileLedgerSource(config.ledger_path(name), encoding=config.encoding),
        StreamPublisher(sys.stdout),
    )
    asyncio.run(service.run(as_of))


def main() -> None:
    """Console-script entrypoint."""
    app()


if __name__ == "__main__":
    main()
