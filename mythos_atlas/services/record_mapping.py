"""Record Mapping — ORM rows to typed records, one row at a time.

Invariants:
    - map_row either returns a record or raises DataIntegrityError
    - map_rows never raises for a bad row: the error takes that row's slot,
      sibling rows map independently
    - Every integrity failure is logged with entity + row id

Design Decisions:
    - Errors kept in place (not filtered out) so the API surface can report them
      per item; dropping them silently would hide corrupt data
"""

import logging
from typing import Iterable, TypeVar

from pydantic import ValidationError

from mythos_atlas.core.errors import DataIntegrityError
from mythos_atlas.schemas.records import CatalogRecord

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=CatalogRecord)


def map_row(record_cls: type[R], row: object) -> R:
    """Validate one ORM row into record_cls. Raises DataIntegrityError."""
    try:
        return record_cls.model_validate(row)
    except ValidationError as e:
        entity = record_cls.__name__.removesuffix("Record")
        row_id = getattr(row, "id", None)
        reason = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        logger.warning(
            f"Row failed to map into {entity}: {reason}",
            extra={"entity": entity, "row_id": str(row_id)},
        )
        raise DataIntegrityError(
            entity, str(row_id) if row_id is not None else None, reason,
        ) from e


def map_rows(
    record_cls: type[R], rows: Iterable[object],
) -> list[R | DataIntegrityError]:
    """Map a batch; failed rows yield their DataIntegrityError in place."""
    results: list[R | DataIntegrityError] = []
    for row in rows:
        try:
            results.append(map_row(record_cls, row))
        except DataIntegrityError as e:
            results.append(e)
    return results
