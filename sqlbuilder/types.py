from __future__ import annotations

from collections.abc import (
    Callable,
    Sequence,
)
from typing import (
    TYPE_CHECKING,
    Any,
    TypeAlias,
)

if TYPE_CHECKING:
    from sqlbuilder.options import Config

# Arguments are carried opaquely, in the order they were appended
Args: TypeAlias = list[Any]
# A single row of values for a bulk insert
InputRow: TypeAlias = Sequence[Any]
Option: TypeAlias = Callable[["Config"], None]
