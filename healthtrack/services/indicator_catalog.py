from typing import Protocol

from sqlalchemy import and_
from sqlalchemy.orm import Session

from healthtrack.models.indicator import Indicator, IndicatorCategory, IndicatorTranslation
from healthtrack.schemas.indicator import IndicatorCategoryItem, IndicatorItem
from healthtrack.services.composer import build_reference_range, localized_name, localized_reference_text


class IndicatorCatalog(Protocol):
    """Read-only view of the indicator catalog used by the session services."""

    def resolve(self, slug: str) -> Indicator | None:
        ...

    def list_by_category(self, language: str) -> list[IndicatorCategoryItem]:
        ...


class SqlIndicatorCatalog:
    def __init__(self, db: Session):
        self.db = db

    def resolve(self, slug: str) -> Indicator | None:
        return self.db.query(Indicator).filter(Indicator.slug == slug).first()

    def list_by_category(self, language: str) -> list[IndicatorCategoryItem]:
        rows = (
            self.db.query(IndicatorCategory, Indicator, IndicatorTranslation)
            .outerjoin(Indicator, Indicator.category_id == IndicatorCategory.id)
            .outerjoin(
                IndicatorTranslation,
                and_(IndicatorTranslation.indicator_id == Indicator.id, IndicatorTranslation.language == language),
            )
            .order_by(IndicatorCategory.id.asc(), Indicator.id.asc())
            .all()
        )

        categories: dict[int, IndicatorCategoryItem] = {}
        for category, indicator, translation in rows:
            item = categories.get(category.id)
            if item is None:
                item = IndicatorCategoryItem(
                    id=category.id,
                    slug=category.slug,
                    color=category.default_color,
                    indicators=[],
                )
                categories[category.id] = item

            if indicator is None:
                continue  # category without indicators
            item.indicators.append(
                IndicatorItem(
                    id=indicator.id,
                    slug=indicator.slug,
                    name=localized_name(
                        translation.translated_name if translation else None,
                        indicator.display_name,
                        indicator.slug,
                    ),
                    unit=indicator.unit or "",
                    reference_range=build_reference_range(indicator),
                    reference_text=localized_reference_text(
                        translation.translated_reference_text if translation else None,
                        indicator.reference_text,
                    ),
                )
            )
        return list(categories.values())
