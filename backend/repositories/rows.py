"""
Row accessors handed to the item projector.
"""

from collections.abc import Mapping
from typing import Any

from services.interfaces import IFieldReader


class DBRow(IFieldReader):
    """
    Wraps a fetched record behind the IFieldReader contract.

    Accepts an ORM model instance, a SQLAlchemy result Row, or a plain
    mapping. Missing fields read as None.
    """

    def __init__(self, record: Any):
        self._record = record

    @property
    def record(self) -> Any:
        return self._record

    def get_value(self, field_name: str) -> Any:
        record = self._record
        if isinstance(record, Mapping):
            return record.get(field_name)

        # sqlalchemy.engine.Row exposes its columns through _mapping
        mapping = getattr(record, '_mapping', None)
        if isinstance(mapping, Mapping):
            return mapping.get(field_name)

        return getattr(record, field_name, None)

    def __repr__(self) -> str:
        return f"DBRow({self._record!r})"


def wrap(record: Any) -> DBRow | None:
    """Wrap a record, passing None through for absent records (e.g. no vote)."""
    if record is None:
        return None
    return DBRow(record)
