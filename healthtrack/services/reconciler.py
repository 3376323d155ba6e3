"""Replace-by-diff reconciliation of a session's measurement set.

Validation and catalog resolution happen first, outside any transaction.
The write helpers expect to run inside ``unit_of_work`` and never commit.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real

from sqlalchemy.orm import Session

from healthtrack.errors import InvalidInput
from healthtrack.models.test_session import Measurement
from healthtrack.schemas.test_session import MeasurementIn
from healthtrack.services.indicator_catalog import IndicatorCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedMeasurement:
    indicator_id: int
    value: float


def _coerce_value(slug: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(f"Invalid value for indicator {slug}")
    try:
        number = float(value)
    except OverflowError:
        raise InvalidInput(f"Invalid value for indicator {slug}") from None
    if not math.isfinite(number):
        raise InvalidInput(f"Invalid value for indicator {slug}")
    return number


def resolve_measurements(
    items: list[MeasurementIn] | None, catalog: IndicatorCatalog
) -> list[ResolvedMeasurement]:
    if not items:
        return []

    slugs: list[str] = []
    for item in items:
        slug = (item.indicator_slug or "").strip()
        if not slug:
            raise InvalidInput("indicatorSlug is required for each measurement")
        if slug in slugs:
            raise InvalidInput(f"Duplicate indicator slug: {slug}")
        slugs.append(slug)

    values = [_coerce_value(slug, item.value) for slug, item in zip(slugs, items)]

    resolved = []
    for slug, value in zip(slugs, values):
        indicator = catalog.resolve(slug)
        if indicator is None:
            logger.warning("Rejected measurement for unknown indicator %s", slug)
            raise InvalidInput(f"Indicator not found: {slug}")
        resolved.append(ResolvedMeasurement(indicator_id=indicator.id, value=value))
    return resolved


def insert_measurements(db: Session, session_id: int, measurements: list[ResolvedMeasurement]) -> None:
    if not measurements:
        return
    db.add_all(
        [
            Measurement(test_session_id=session_id, indicator_id=m.indicator_id, value=m.value)
            for m in measurements
        ]
    )
    db.flush()


def replace_measurements(db: Session, session_id: int, measurements: list[ResolvedMeasurement]) -> None:
    """Make the stored set for ``session_id`` equal ``measurements``.

    Rows whose indicator is not in the new set are deleted, rows for indicators
    already present get their value overwritten, the rest are inserted.
    """
    stale = db.query(Measurement).filter(Measurement.test_session_id == session_id)
    if measurements:
        stale = stale.filter(Measurement.indicator_id.not_in([m.indicator_id for m in measurements]))
    removed = stale.delete(synchronize_session="fetch")

    if not measurements:
        db.flush()
        logger.debug("Cleared %d measurements from session %s", removed, session_id)
        return

    existing = {
        row.indicator_id: row
        for row in db.query(Measurement).filter(Measurement.test_session_id == session_id).all()
    }
    for m in measurements:
        row = existing.get(m.indicator_id)
        if row is not None:
            row.value = m.value
        else:
            db.add(Measurement(test_session_id=session_id, indicator_id=m.indicator_id, value=m.value))
    db.flush()
    logger.debug("Reconciled session %s: removed %d, kept or added %d", session_id, removed, len(measurements))
