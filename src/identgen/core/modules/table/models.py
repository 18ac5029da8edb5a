"""Built-in symbol tables."""

from enum import StrEnum
from types import MappingProxyType

from identgen.core.modules.table.validators import validate_table
from identgen.errors import ValidationError
from identgen.utils import split_symbols

# All characters of the snake_case standard. The order is part of the
# generated sequence: `y` is missing and `f` comes before `e`.
DEFAULT_TABLE: tuple[str, ...] = (
    "a", "b", "c", "d", "f", "e", "g", "h", "i", "j", "k", "l", "m",
    "n", "o", "p", "q", "r", "s", "t", "u", "v", "w", "x", "z", "_",
)  # fmt: skip

# Upper SNAKE_CASE mirror of DEFAULT_TABLE, same ordering quirks.
UPPER_SNAKE: tuple[str, ...] = (
    "A", "B", "C", "D", "F", "E", "G", "H", "I", "J", "K", "L", "M",
    "N", "O", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Z", "_",
)  # fmt: skip


class TableName(StrEnum):
    """Names of the built-in tables."""

    LOWER = "lower"
    UPPER = "upper"


NAMED_TABLES: MappingProxyType[TableName, tuple[str, ...]] = MappingProxyType(
    {
        TableName.LOWER: DEFAULT_TABLE,
        TableName.UPPER: UPPER_SNAKE,
    }
)


def resolve_table(value: str) -> tuple[str, ...]:
    """Resolve a table name or literal table text to a tuple of symbols.

    Known names (`lower`, `upper`) select a built-in table, any other text
    is split into its code points, so `resolve_table("abc")` is `("a", "b", "c")`.

    Raises:
        ValidationError: If the value is empty
    """
    if not value:
        raise ValidationError("Table cannot be empty")
    if value in TableName:
        return NAMED_TABLES[TableName(value)]
    return validate_table(split_symbols(value))
