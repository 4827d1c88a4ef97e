"""vestledger.infra — collaborator protocols, adapters, configuration, logging."""

from vestledger.infra.config import VestledgerConfig as VestledgerConfig
from vestledger.infra.config import load_config as load_config
from vestledger.infra.file_adapter import CsvFileLedgerSource as CsvFileLedgerSource
from vestledger.infra.file_adapter import StreamPublisher as StreamPublisher
from vestledger.infra.logger import get_logger as get_logger
from vestledger.infra.logger import setup_logging as setup_logging
from vestledger.infra.memory_adapter import InMemoryLedgerSource as InMemoryLedgerSource
from vestledger.infra.memory_adapter import (
    InMemorySnapshotPublisher as InMemorySnapshotPublisher,
)
from vestledger.infra.protocols import LedgerSource as LedgerSource
from vestledger.infra.protocols import SnapshotPublisher as SnapshotPublisher
