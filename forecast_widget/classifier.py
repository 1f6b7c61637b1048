# ABOUTME: Pure functions mapping weather text to an icon category and a timestamp to a period label.
# ABOUTME: Icon matching is driven by an ordered rule table so precedence is explicit and testable.

from collections.abc import Callable
from datetime import datetime

from forecast_widget.models import ClassifiedSlot, IconCategory, PeriodLabel, RawForecastSlot

TEMPERATURE_UNIT = "°C"


def _contains_any(*tokens: str) -> Callable[[str], bool]:
    """Build a predicate that is true when the text contains any of the tokens."""
    lowered = tuple(t.lower() for t in tokens)
    return lambda text: any(t in text for t in lowered)


# Order matters: free text often mentions several conditions ("多雲時晴", "cloudy with rain").
ICON_RULES: list[tuple[Callable[[str], bool], IconCategory]] = [
    (_contains_any("晴", "sunny", "clear"), IconCategory.CLEAR),
    (_contains_any("多雲", "陰", "cloud", "overcast"), IconCategory.CLOUDY),
    (_contains_any("雨", "rain", "shower", "drizzle"), IconCategory.RAIN),
    (_contains_any("雷", "thunder"), IconCategory.THUNDER),
    (_contains_any("雪", "snow"), IconCategory.SNOW),
    (_contains_any("霧", "fog", "mist"), IconCategory.FOG),
]


def classify_icon(weather_text: str | None) -> IconCategory:
    """Return the category of the first rule whose tokens appear in the text."""
    text = (weather_text or "").lower()
    for predicate, category in ICON_RULES:
        if predicate(text):
            return category
    return IconCategory.UNKNOWN


def classify_period(start_time: str | None) -> PeriodLabel:
    """Bucket a `YYYY-MM-DD HH:MM:SS` local timestamp into a time-of-day label.

    Unparseable input degrades to UNKNOWN instead of raising.
    """
    try:
        hour = datetime.fromisoformat(start_time.strip()).hour
    except (AttributeError, TypeError, ValueError):
        return PeriodLabel.UNKNOWN

    if 6 <= hour < 12:
        return PeriodLabel.MORNING
    if 12 <= hour < 18:
        return PeriodLabel.AFTERNOON
    if 18 <= hour < 24 or 0 <= hour < 6:
        return PeriodLabel.EVENING
    return PeriodLabel.UNKNOWN


def normalize_min_temp(value: str) -> str:
    """Drop the unit from the low end of a range so it reads as `18~24°C`."""
    return value.replace(TEMPERATURE_UNIT, "").strip()


def classify_slot(raw: RawForecastSlot) -> ClassifiedSlot:
    return ClassifiedSlot(
        start_time=raw.start_time,
        weather=raw.weather,
        min_temp=normalize_min_temp(raw.min_temp),
        max_temp=raw.max_temp,
        rain=raw.rain,
        comfort=raw.comfort,
        icon=classify_icon(raw.weather),
        period_label=classify_period(raw.start_time),
    )
