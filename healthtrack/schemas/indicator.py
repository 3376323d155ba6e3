from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RangeBounds(BaseModel):
    min: float | None
    max: float | None


class ReferenceRange(BaseModel):
    """Normal interval for an indicator. ``male``/``female`` are only set when sex-specific bounds exist."""
    min: float | None
    max: float | None
    male: RangeBounds | None = None
    female: RangeBounds | None = None


class IndicatorItem(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    slug: str
    name: str
    unit: str
    reference_range: ReferenceRange
    reference_text: str | None


class IndicatorCategoryItem(BaseModel):
    id: int
    slug: str
    color: str | None
    indicators: list[IndicatorItem]
