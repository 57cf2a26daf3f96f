"""
Persistence gateway: runs parameterized SQL against the books store.

Statement templates use positional markers `:p1`, `:p2`, ... and the N-th
parameter is bound to `:pN`. Values never end up in the SQL text itself.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .db_connection import get_engine
from .exceptions import StoreError

logger = logging.getLogger(__name__)


def bind_positional(parameters: Sequence[Any]) -> Dict[str, Any]:
    return {f"p{index}": value for index, value in enumerate(parameters, start=1)}


@dataclass(frozen=True)
class StatementResult:
    rows: List[Dict[str, Any]] = field(default_factory=list)
    row_count: int = 0


class Gateway:
    """Executes one statement per call on a pooled connection."""

    def __init__(self, engine: Engine):
        self._engine = engine

    @classmethod
    def from_settings(cls, settings) -> "Gateway":
        return cls(get_engine(settings))

    @property
    def engine(self) -> Engine:
        return self._engine

    def execute(self, statement: str, parameters: Sequence[Any] = ()) -> StatementResult:
        """Run `statement` with `parameters` bound in order.

        Returns the fetched rows (as dicts) for statements that produce rows,
        otherwise the affected-row count. Any driver or database failure is
        raised as `StoreError`; the connection goes back to the pool either way.
        """
        logger.debug("Executing %s with %d parameter(s)", statement, len(parameters))
        try:
            with self._engine.begin() as conn:
                result = conn.execute(text(statement), bind_positional(parameters))
                if result.returns_rows:
                    rows = [dict(row) for row in result.mappings().all()]
                    return StatementResult(rows=rows, row_count=len(rows))
                return StatementResult(rows=[], row_count=result.rowcount)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def close(self) -> None:
        self._engine.dispose()
