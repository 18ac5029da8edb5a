"""Identifier generator walking every combination of a symbol table."""

from collections.abc import Iterable, Iterator
from typing import Self

from identgen.core.modules.table.models import DEFAULT_TABLE
from identgen.core.modules.table.validators import validate_table
from identgen.utils import split_symbols


class IdentGen:
    """Identifier generator over an ordered table of symbols.

    Identifiers are enumerated length by length: with the table `abc` the
    sequence starting from the empty identifier is `a, b, c, ca, cb, cc, cca, ...`.
    When the rightmost digit overflows it stays at the last symbol and the
    first symbol is appended as a new rightmost digit.

    The current identifier lives in `ident`, which callers may read or
    overwrite directly. Symbols of `ident` that are not in the table count as
    the first symbol when the next move reaches them.

    Not thread-safe: callers sharing one generator must serialize access.
    """

    def __init__(self, table: Iterable[str] | str = ()) -> None:
        """Create a generator with an empty identifier.

        Args:
            table: Ordered symbols, or text split into one symbol per code point.
                An empty table selects DEFAULT_TABLE.
        """
        self.ident = ""
        symbols = _as_symbols(table)
        self._table = validate_table(symbols) if symbols else DEFAULT_TABLE

    @property
    def table(self) -> tuple[str, ...]:
        """Symbol table used by advance()."""
        return self._table

    def set_table(self, table: Iterable[str] | str) -> Self:
        """Replace the symbol table, keeping the current identifier as is.

        Symbols of the identifier missing from the new table are treated as
        its first symbol when the next move reaches them.

        Raises:
            ValidationError: If the table is empty or has an empty symbol,
                the generator is left unchanged
        """
        self._table = validate_table(_as_symbols(table))
        return self

    def clear(self) -> None:
        """Reset the identifier to the empty one, before the first combination."""
        self.ident = ""

    def next(self) -> str:
        """Convenience for `advance(1)`."""
        return self.advance(1)

    def prev(self) -> str:
        """Convenience for `advance(-1)`."""
        return self.advance(-1)

    def regress(self, count: int) -> str:
        """Move `count` combinations back, stopping at the empty identifier."""
        return self.advance(-count)

    def letter_by(self, offset: int) -> str:
        """Alias of advance(), accepting a signed offset."""
        return self.advance(offset)

    def advance(self, offset: int) -> str:
        """Move the identifier `offset` combinations forward, or back when negative.

        Moving back past the first combination leaves the empty identifier.

        Examples:
            >>> gen = IdentGen("abc")
            >>> gen.advance(4)
            'ca'
            >>> gen.advance(-2)
            'b'
        """
        if offset > 0:
            self.ident = self._forward(self.ident, offset)
        elif offset < 0:
            self.ident = self._backward(self.ident, offset)
        return self.ident

    def _forward(self, ident: str, offset: int) -> str:
        table = self._table
        if not ident:
            ident = table[0]
            offset -= 1
            if offset == 0:
                return ident

        position, start = self._locate(ident, len(ident))
        # Every carry pins the digit to the last symbol and opens a new
        # rightmost digit at the first symbol.
        carries, position = divmod(position + offset, len(table))
        return ident[:start] + table[-1] * carries + table[position]

    def _backward(self, ident: str, offset: int) -> str:
        table = self._table
        end = len(ident)
        while end:
            position, start = self._locate(ident, end)
            position += offset
            if position >= 0:
                return ident[:start] + table[position]
            # Dropping the digit consumes one unit of what is left
            end = start
            offset = position + 1
            if offset == 0:
                break
        return ident[:end]

    def _locate(self, ident: str, end: int) -> tuple[int, int]:
        """Find the table position of the symbol ending at `end` and where it starts.

        The first table symbol that `ident[:end]` ends with wins. Without a
        match the unit is the last code point and its position is 0.
        """
        for position, symbol in enumerate(self._table):
            if ident.endswith(symbol, 0, end):
                return position, end - len(symbol)
        return 0, end - 1

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.advance(1)

    def __len__(self) -> int:
        return len(self.ident)

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IdentGen):
            return self.ident == other.ident and self._table == other._table
        if isinstance(other, str):
            return self.ident == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.ident

    def __repr__(self) -> str:
        return repr(self.ident)


def _as_symbols(table: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(table, str):
        return split_symbols(table)
    return tuple(table)
