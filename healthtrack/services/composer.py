from collections import defaultdict
from datetime import datetime, timezone

from sqlalchemy import and_
from sqlalchemy.orm import Session

from healthtrack.models.indicator import Indicator, IndicatorTranslation
from healthtrack.models.test_session import Measurement, TestSession
from healthtrack.schemas.indicator import RangeBounds, ReferenceRange
from healthtrack.schemas.test_session import MeasurementView, TestSessionView


def localized_name(translated: str | None, display_name: str | None, slug: str | None) -> str:
    for candidate in (translated, display_name, slug):
        if candidate is not None:
            return candidate
    return ""


def localized_reference_text(translated: str | None, default: str | None) -> str | None:
    return translated if translated is not None else default


def _bounds(low: float | None, high: float | None) -> RangeBounds | None:
    if low is None and high is None:
        return None
    return RangeBounds(min=low, max=high)


def build_reference_range(indicator: Indicator) -> ReferenceRange:
    reference_range = ReferenceRange(min=indicator.reference_min, max=indicator.reference_max)
    male = _bounds(indicator.reference_male_min, indicator.reference_male_max)
    female = _bounds(indicator.reference_female_min, indicator.reference_female_max)
    # Only assign sex-specific ranges that exist so they stay unset in exclude_unset dumps.
    if male is not None:
        reference_range.male = male
    if female is not None:
        reference_range.female = female
    return reference_range


def load_measurement_rows(
    db: Session, session_ids: list[int], language: str
) -> dict[int, list[tuple[Measurement, Indicator, IndicatorTranslation | None]]]:
    """Fetch measurements for the given sessions joined with catalog metadata, in catalog order."""
    if not session_ids:
        return {}

    rows = (
        db.query(Measurement, Indicator, IndicatorTranslation)
        .join(Indicator, Indicator.id == Measurement.indicator_id)
        .outerjoin(
            IndicatorTranslation,
            and_(IndicatorTranslation.indicator_id == Indicator.id, IndicatorTranslation.language == language),
        )
        .filter(Measurement.test_session_id.in_(session_ids))
        .order_by(Measurement.test_session_id.asc(), Indicator.category_id.asc(), Indicator.id.asc())
        .all()
    )

    grouped = defaultdict(list)
    for measurement, indicator, translation in rows:
        grouped[measurement.test_session_id].append((measurement, indicator, translation))
    return grouped


def to_measurement_view(
    measurement: Measurement, indicator: Indicator, translation: IndicatorTranslation | None
) -> MeasurementView:
    return MeasurementView(
        id=measurement.id,
        indicator_id=indicator.id,
        indicator_slug=indicator.slug,
        indicator_name=localized_name(
            translation.translated_name if translation else None,
            indicator.display_name,
            indicator.slug,
        ),
        unit=indicator.unit or "",
        value=measurement.value,
        reference_text=localized_reference_text(
            translation.translated_reference_text if translation else None,
            indicator.reference_text,
        ),
        reference_range=build_reference_range(indicator),
    )


def as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back naive; they are stored in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_session_view(session: TestSession, rows) -> TestSessionView:
    return TestSessionView(
        id=session.id,
        label=session.label,
        month=session.month,
        year=session.year,
        measured_at=session.measured_at,
        created_at=as_utc(session.created_at),
        measurements=[to_measurement_view(*row) for row in rows],
    )


def compose_sessions(db: Session, sessions: list[TestSession], language: str) -> list[TestSessionView]:
    measurements_by_session = load_measurement_rows(db, [s.id for s in sessions], language)
    return [to_session_view(session, measurements_by_session.get(session.id, [])) for session in sessions]
