from pathlib import Path

import structlog
from pydantic import ValidationError as PydanticValidationError

from identgen.core.modules.ident.generator import IdentGen
from identgen.core.modules.ident.models import IdentState
from identgen.core.modules.table.models import resolve_table
from identgen.errors import ValidationError

logger = structlog.get_logger(__name__)


class IdentService:
    """Identifier cursor persisted in a JSON state file between runs."""

    def __init__(self, state_path: str | Path, default_table: str) -> None:
        self._state_path = Path(state_path)
        self._default_table = default_table
        self._gen: IdentGen | None = None

    @property
    def gen(self) -> IdentGen:
        """Loaded generator, read from the state file on first access."""
        if self._gen is None:
            self._gen = self.load()
        return self._gen

    def load(self) -> IdentGen:
        """Read the state file, or start an empty identifier with the default table."""
        if not self._state_path.exists():
            logger.debug("state_file_missing", path=str(self._state_path))
            return IdentGen(resolve_table(self._default_table))

        try:
            state = IdentState.model_validate_json(self._state_path.read_text(encoding="utf-8"))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid state file {self._state_path}: {e.error_count()} error(s)") from e
        return state.to_generator()

    def save(self) -> None:
        """Write the current state, replacing the state file atomically."""
        data = IdentState.from_generator(self.gen).model_dump_json()
        tmp_path = self._state_path.with_name(self._state_path.name + ".tmp")
        tmp_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(data, encoding="utf-8")
        tmp_path.replace(self._state_path)

    def current(self) -> str:
        """Get the current identifier without moving."""
        return self.gen.ident

    def advance(self, offset: int) -> str:
        """Move the identifier by a signed offset and persist it."""
        previous = self.gen.ident
        ident = self.gen.advance(offset)
        self.save()
        logger.info("ident_advanced", offset=offset, previous=previous, ident=ident)
        return ident

    def take(self, count: int) -> list[str]:
        """Return the next `count` identifiers, persisting the last one."""
        if count < 0:
            raise ValidationError("Count cannot be negative")
        idents = [self.gen.next() for _ in range(count)]
        self.save()
        logger.info("ident_advanced", offset=count, ident=self.gen.ident)
        return idents

    def clear(self) -> None:
        """Reset the identifier to empty and persist it."""
        self.gen.clear()
        self.save()
        logger.info("ident_cleared")

    def set_table(self, value: str) -> tuple[str, ...]:
        """Replace the table by name or literal symbols and persist it."""
        table = self.gen.set_table(resolve_table(value)).table
        self.save()
        logger.info("table_replaced", table="".join(table), size=len(table))
        return table
