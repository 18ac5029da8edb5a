from collections.abc import Iterable

from identgen.errors import ValidationError


def validate_table(symbols: Iterable[str]) -> tuple[str, ...]:
    """Validate a table of symbols and return it as a tuple.

    Requirements:
    - At least one symbol
    - No empty symbols (an empty symbol would match the end of every identifier)

    Duplicate symbols are allowed, position lookups pick the first match.

    Raises:
        ValidationError: If the table doesn't meet requirements
    """
    table = tuple(symbols)
    if not table:
        raise ValidationError("Table cannot be empty")

    for index, symbol in enumerate(table):
        if not isinstance(symbol, str):
            raise ValidationError(f"Table symbol at position {index} is not a string: {symbol!r}")
        if not symbol:
            raise ValidationError(f"Table symbol at position {index} is empty")

    return table
