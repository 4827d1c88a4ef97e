"""vestledger.gateway — record ingestion and invocation validation."""

from vestledger.gateway.invocation import (
    validate_ledger_name as validate_ledger_name,
)
from vestledger.gateway.invocation import (
    validate_target_date as validate_target_date,
)
from vestledger.gateway.parser import (
    ParsedLedger as ParsedLedger,
)
from vestledger.gateway.parser import (
    format_aggregate as format_aggregate,
)
from vestledger.gateway.parser import (
    parse_ledger as parse_ledger,
)
from vestledger.gateway.parser import (
    parse_line as parse_line,
)
from vestledger.gateway.parser import (
    parse_row as parse_row,
)
from vestledger.gateway.parser import (
    split_records as split_records,
)
from vestledger.gateway.parser import (
    split_fields as split_fields,
)
