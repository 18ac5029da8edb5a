"""Persisted form of an identifier generator."""

from pydantic import BaseModel, Field

from identgen.core.modules.ident.generator import IdentGen
from identgen.utils import is_single_code_point


class IdentState(BaseModel):
    """Table and identifier pair, the whole state of an IdentGen."""

    table: str | list[str] = Field(
        ..., description="Table text split into one symbol per code point, or an explicit list of symbols"
    )
    ident: str = Field("", description="Current identifier")

    @classmethod
    def from_generator(cls, gen: IdentGen) -> "IdentState":
        """Capture the state of a generator.

        Tables made of single code points are stored as plain text, tables
        with longer symbols keep their symbol boundaries as a list.
        """
        table: str | list[str] = "".join(gen.table) if is_single_code_point(gen.table) else list(gen.table)
        return cls(table=table, ident=gen.ident)

    def to_generator(self) -> IdentGen:
        """Rebuild a generator from the stored state.

        Raises:
            ValidationError: If the stored table is empty or has an empty symbol
        """
        gen = IdentGen().set_table(self.table)
        gen.ident = self.ident
        return gen
