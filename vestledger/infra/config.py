"""Runtime configuration for the vestledger command.

Pure configuration data plus one loader that overlays environment
variables on the defaults. No I/O beyond reading the mapping it is given.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import final

from vestledger.core.errors import InvocationValidationError
from vestledger.core.result import Err, Ok
from vestledger.core.types import UtcDatetime

ENV_LEDGER_DIR: str = "VESTLEDGER_LEDGER_DIR"
ENV_ENCODING: str = "VESTLEDGER_ENCODING"
ENV_LOG_LEVEL: str = "VESTLEDGER_LOG_LEVEL"
ENV_LOG_FORMAT: str = "VESTLEDGER_LOG_FORMAT"

LOG_FORMATS: tuple[str, ...] = ("console", "json")

# Characters that would let a ledger name escape the ledger directory
# or break on common filesystems.
FORBIDDEN_NAME_CHARS: frozenset[str] = frozenset('\\/:*?"<>|')


@final
@dataclass(frozen=True, slots=True)
class VestledgerConfig:
    """Where ledgers live, how they are decoded, and how runs are logged."""

    ledger_dir: Path = Path(".")
    encoding: str = "utf-8"
    allowed_extensions: tuple[str, ...] = (".csv",)
    log_level: str = "WARNING"
    log_format: str = "console"  # "console" for terminals, "json" for collectors

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise TypeError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")
        if not self.allowed_extensions:
            raise TypeError("allowed_extensions must be non-empty")

    def ledger_path(self, ledger_name: str) -> Path:
        """Location of a (validated) ledger name inside ledger_dir."""
        return self.ledger_dir / ledger_name


def load_config(
    environ: Mapping[str, str] | None = None,
    base: VestledgerConfig | None = None,
) -> Ok[VestledgerConfig] | Err[InvocationValidationError]:
    """Overlay VESTLEDGER_* environment variables on base (or the defaults).

    Unset or empty variables leave the base value in place. An unknown
    log format is an invocation error, not an exception.
    """
    env = os.environ if environ is None else environ
    config = base if base is not None else VestledgerConfig()

    if ledger_dir := env.get(ENV_LEDGER_DIR):
        config = replace(config, ledger_dir=Path(ledger_dir))
    if encoding := env.get(ENV_ENCODING):
        config = replace(config, encoding=encoding)
    if log_level := env.get(ENV_LOG_LEVEL):
        config = replace(config, log_level=log_level.upper())
    if log_format := env.get(ENV_LOG_FORMAT):
        if log_format.lower() not in LOG_FORMATS:
            return Err(InvocationValidationError(
                message=f"{ENV_LOG_FORMAT} must be one of {LOG_FORMATS}, got {log_format!r}",
                code="INVALID_INVOCATION",
                timestamp=UtcDatetime.now(),
                source="infra.config.load_config",
                argument=ENV_LOG_FORMAT,
                actual_value=log_format,
            ))
        config = replace(config, log_format=log_format.lower())
    return Ok(config)
