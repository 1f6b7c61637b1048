# ABOUTME: Pydantic BaseModels for the forecast payload, classified slots, and the view model.
# ABOUTME: Defines the icon and period enumerations shared by the classifier, pipeline, and renderers.

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class IconCategory(StrEnum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    THUNDER = "thunder"
    SNOW = "snow"
    FOG = "fog"
    UNKNOWN = "unknown"


class PeriodLabel(StrEnum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    UNKNOWN = "unknown"


class PipelineState(StrEnum):
    IDLE = "idle"
    FETCHING = "fetching"
    VALIDATING = "validating"
    CLASSIFYING = "classifying"
    DONE = "done"
    FAILED = "failed"


class RawForecastSlot(BaseModel):
    """One forecast time window exactly as the API sends it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_time: str = Field(alias="startTime")
    weather: str
    min_temp: str = Field(alias="minTemp")
    max_temp: str = Field(alias="maxTemp")
    rain: str
    comfort: str = ""


class RawPayload(BaseModel):
    """Flattened forecast API response: the success flag plus the contents of `data`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    city: str
    update_time: str | None = Field(default=None, alias="updateTime")
    forecasts: list[RawForecastSlot] = []


class ClassifiedSlot(BaseModel):
    """A forecast slot with its icon and period resolved, ready for display.

    `min_temp` has its unit suffix stripped so the pair reads as a range,
    while `max_temp` keeps the unit as sent.
    """

    model_config = ConfigDict(frozen=True)

    start_time: str
    weather: str
    min_temp: str
    max_temp: str
    rain: str
    comfort: str = ""
    icon: IconCategory
    period_label: PeriodLabel

    @property
    def temperature_range(self) -> str:
        return f"{self.min_temp}~{self.max_temp}"


class ViewModel(BaseModel):
    """Everything a render sink needs to draw the widget."""

    model_config = ConfigDict(frozen=True)

    city_name: str
    update_notice: str | None = None
    current: ClassifiedSlot
    future: list[ClassifiedSlot] = []


class FetchResponse(BaseModel):
    """Status and raw body returned by a fetch capability."""

    status_code: int
    body: bytes | str = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
