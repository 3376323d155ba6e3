import logging

from healthtrack.database import SessionLocal
from healthtrack.models.indicator import Indicator, IndicatorCategory, IndicatorTranslation

logger = logging.getLogger(__name__)


CATEGORIES = [
    {"slug": "cardiovascular", "color": "#E57373"},
    {"slug": "metabolic", "color": "#FFB74D"},
    {"slug": "lipid", "color": "#FFD54F"},
    {"slug": "kidney", "color": "#64B5F6"},
    {"slug": "liver", "color": "#81C784"},
    {"slug": "blood_count", "color": "#BA68C8"},
    {"slug": "body", "color": "#90A4AE"},
]

INDICATORS = [
    {
        "slug": "bp_sys", "category": "cardiovascular", "name": "Systolic blood pressure", "unit": "mmHg",
        "range": (90, 120), "vi": "Huyết áp tâm thu",
    },
    {
        "slug": "bp_dia", "category": "cardiovascular", "name": "Diastolic blood pressure", "unit": "mmHg",
        "range": (60, 80), "vi": "Huyết áp tâm trương",
    },
    {
        "slug": "heart_rate", "category": "cardiovascular", "name": "Resting heart rate", "unit": "bpm",
        "range": (60, 100), "vi": "Nhịp tim lúc nghỉ",
    },
    {
        "slug": "glucose", "category": "metabolic", "name": "Fasting glucose", "unit": "mg/dL",
        "range": (70, 99), "vi": "Đường huyết lúc đói",
        "text": "Fasting at least 8 hours", "vi_text": "Nhịn ăn ít nhất 8 giờ",
    },
    {
        "slug": "hba1c", "category": "metabolic", "name": "HbA1c", "unit": "%",
        "range": (4.0, 5.6), "vi": "HbA1c",
    },
    {
        "slug": "total_cholesterol", "category": "lipid", "name": "Total cholesterol", "unit": "mg/dL",
        "range": (None, 200), "vi": "Cholesterol toàn phần",
    },
    {
        "slug": "ldl", "category": "lipid", "name": "LDL cholesterol", "unit": "mg/dL",
        "range": (None, 100), "vi": "LDL cholesterol",
    },
    {
        "slug": "hdl", "category": "lipid", "name": "HDL cholesterol", "unit": "mg/dL",
        "male": (40, None), "female": (50, None), "vi": "HDL cholesterol",
    },
    {
        "slug": "triglycerides", "category": "lipid", "name": "Triglycerides", "unit": "mg/dL",
        "range": (None, 150), "vi": "Triglycerid",
    },
    {
        "slug": "creatinine", "category": "kidney", "name": "Creatinine", "unit": "mg/dL",
        "male": (0.7, 1.3), "female": (0.6, 1.1), "vi": "Creatinin",
    },
    {
        "slug": "uric_acid", "category": "kidney", "name": "Uric acid", "unit": "mg/dL",
        "male": (3.4, 7.0), "female": (2.4, 6.0), "vi": "Acid uric",
    },
    {
        "slug": "alt", "category": "liver", "name": "ALT", "unit": "U/L",
        "range": (7, 56), "vi": "ALT (GPT)",
    },
    {
        "slug": "ast", "category": "liver", "name": "AST", "unit": "U/L",
        "range": (10, 40), "vi": "AST (GOT)",
    },
    {
        "slug": "hemoglobin", "category": "blood_count", "name": "Hemoglobin", "unit": "g/dL",
        "male": (13.5, 17.5), "female": (12.0, 15.5), "vi": "Huyết sắc tố",
    },
    {
        "slug": "platelets", "category": "blood_count", "name": "Platelets", "unit": "10^3/uL",
        "range": (150, 450), "vi": "Tiểu cầu",
    },
    {
        "slug": "weight", "category": "body", "name": "Body weight", "unit": "kg",
        "vi": "Cân nặng",
    },
    {
        "slug": "bmi", "category": "body", "name": "Body mass index", "unit": "kg/m2",
        "range": (18.5, 24.9), "vi": "Chỉ số khối cơ thể",
    },
]


def _apply_indicator(indicator: Indicator, item: dict, category_id: int) -> None:
    low, high = item.get("range", (None, None))
    male_low, male_high = item.get("male", (None, None))
    female_low, female_high = item.get("female", (None, None))
    indicator.category_id = category_id
    indicator.display_name = item["name"]
    indicator.unit = item["unit"]
    indicator.reference_min = low
    indicator.reference_max = high
    indicator.reference_male_min = male_low
    indicator.reference_male_max = male_high
    indicator.reference_female_min = female_low
    indicator.reference_female_max = female_high
    indicator.reference_text = item.get("text")


def _apply_translation(indicator: Indicator, language: str, name: str, text: str | None) -> None:
    translation = next((t for t in indicator.translations if t.language == language), None)
    if translation is None:
        translation = IndicatorTranslation(language=language)
        indicator.translations.append(translation)
    translation.translated_name = name
    translation.translated_reference_text = text


def seed_indicators(session_factory=SessionLocal):
    db = session_factory()
    try:
        categories = {row.slug: row for row in db.query(IndicatorCategory).all()}
        for item in CATEGORIES:
            category = categories.get(item["slug"])
            if category is None:
                category = IndicatorCategory(slug=item["slug"])
                db.add(category)
                categories[item["slug"]] = category
            category.default_color = item["color"]
        db.flush()

        existing = {row.slug: row for row in db.query(Indicator).all()}
        for item in INDICATORS:
            indicator = existing.get(item["slug"])
            if indicator is None:
                indicator = Indicator(slug=item["slug"])
                db.add(indicator)
            _apply_indicator(indicator, item, categories[item["category"]].id)
            _apply_translation(indicator, "vi", item["vi"], item.get("vi_text"))
            _apply_translation(indicator, "en", item["name"], item.get("text"))
        db.commit()
        logger.info("Seeded %d indicator categories and %d indicators", len(CATEGORIES), len(INDICATORS))
    finally:
        db.close()
