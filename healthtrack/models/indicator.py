from sqlalchemy import Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from healthtrack.database import Base


class IndicatorCategory(Base):
    __tablename__ = "indicator_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    default_color: Mapped[str | None] = mapped_column(String(20), nullable=True)

    indicators = relationship("Indicator", back_populates="category", order_by="Indicator.id")


class Indicator(Base):
    __tablename__ = "indicators"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(ForeignKey("indicator_categories.id"), index=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    unit: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reference_min: Mapped[float | None] = mapped_column(Float, nullable=True)
    reference_max: Mapped[float | None] = mapped_column(Float, nullable=True)
    reference_male_min: Mapped[float | None] = mapped_column(Float, nullable=True)
    reference_male_max: Mapped[float | None] = mapped_column(Float, nullable=True)
    reference_female_min: Mapped[float | None] = mapped_column(Float, nullable=True)
    reference_female_max: Mapped[float | None] = mapped_column(Float, nullable=True)
    reference_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    category = relationship("IndicatorCategory", back_populates="indicators")
    translations = relationship("IndicatorTranslation", back_populates="indicator", cascade="all, delete-orphan")
    measurements = relationship("Measurement", back_populates="indicator")


class IndicatorTranslation(Base):
    __tablename__ = "indicator_translations"
    __table_args__ = (UniqueConstraint("indicator_id", "language", name="uq_indicator_translation_language"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    indicator_id: Mapped[int] = mapped_column(ForeignKey("indicators.id", ondelete="CASCADE"), index=True, nullable=False)
    language: Mapped[str] = mapped_column(String(10), nullable=False)
    translated_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    translated_reference_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    indicator = relationship("Indicator", back_populates="translations")
