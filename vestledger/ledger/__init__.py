"""vestledger.ledger — Ledger domain types and replay engine."""

from vestledger.ledger.engine import SnapshotAggregator as SnapshotAggregator
from vestledger.ledger.engine import compute_snapshot as compute_snapshot
from vestledger.ledger.engine import effective_quantity as effective_quantity
from vestledger.ledger.engine import order_entries as order_entries
from vestledger.ledger.ordering import DuplicatePolicy as DuplicatePolicy
from vestledger.ledger.ordering import OrderingIndex as OrderingIndex
from vestledger.ledger.ordering import aggregate_key as aggregate_key
from vestledger.ledger.ordering import chronological_index as chronological_index
from vestledger.ledger.ordering import chronological_key as chronological_key
from vestledger.ledger.ordering import collation_key as collation_key
from vestledger.ledger.ordering import key_index as key_index
from vestledger.ledger.transition import apply_transition as apply_transition
from vestledger.ledger.types import BalanceAggregate as BalanceAggregate
from vestledger.ledger.types import CompositeKey as CompositeKey
from vestledger.ledger.types import EntryKind as EntryKind
from vestledger.ledger.types import LedgerEntry as LedgerEntry
