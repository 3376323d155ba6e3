from healthtrack.models.indicator import Indicator, IndicatorCategory, IndicatorTranslation
from healthtrack.models.test_session import Measurement, TestSession

__all__ = [
    "IndicatorCategory",
    "Indicator",
    "IndicatorTranslation",
    "TestSession",
    "Measurement",
]
