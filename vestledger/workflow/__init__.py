"""vestledger.workflow — end-to-end snapshot run."""

from vestledger.workflow.snapshot import SnapshotReport as SnapshotReport
from vestledger.workflow.snapshot import SnapshotService as SnapshotService
