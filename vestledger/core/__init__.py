"""vestledger.core — public API for all core types."""

from vestledger.core.errors import (
    AccessFailure as AccessFailure,
)
from vestledger.core.errors import (
    FieldViolation as FieldViolation,
)
from vestledger.core.errors import (
    InvocationValidationError as InvocationValidationError,
)
from vestledger.core.errors import (
    RowParseError as RowParseError,
)
from vestledger.core.errors import (
    VestledgerError as VestledgerError,
)
from vestledger.core.result import (
    Err as Err,
)
from vestledger.core.result import (
    Ok as Ok,
)
from vestledger.core.result import (
    partition as partition,
)
from vestledger.core.result import (
    unwrap as unwrap,
)
from vestledger.core.types import (
    NonEmptyStr as NonEmptyStr,
)
from vestledger.core.types import (
    NonNegativeInt as NonNegativeInt,
)
from vestledger.core.types import (
    UtcDatetime as UtcDatetime,
)
