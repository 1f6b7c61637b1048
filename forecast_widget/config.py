# ABOUTME: Pipeline configuration: endpoint, slot policy, update-notice toggle, theme, and timeout.
# ABOUTME: Loads values from the environment (and a .env file via python-dotenv) into a frozen model.

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from forecast_widget.themes import EMOJI_THEME, THEMES, IconStyleTheme

DEFAULT_ENDPOINT = "https://nutc-web-vic-peng.zeabur.app/api/weather/kaohsiung"
DEFAULT_TIMEOUT_SECONDS = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class MinimumSlotPolicy(BaseModel):
    """How many slots a payload must carry, and how many of them are displayed.

    `limit=None` keeps the whole sequence.
    """

    model_config = ConfigDict(frozen=True)

    minimum: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_limit_covers_minimum(self) -> "MinimumSlotPolicy":
        if self.limit is not None and self.limit < self.minimum:
            raise ValueError(f"limit ({self.limit}) must not be smaller than minimum ({self.minimum})")
        return self

    def select(self, forecasts: list) -> list:
        return list(forecasts) if self.limit is None else list(forecasts[: self.limit])


ALL_SLOTS = MinimumSlotPolicy(minimum=1)
FIRST_THREE = MinimumSlotPolicy(minimum=3, limit=3)

SLOT_POLICIES: dict[str, MinimumSlotPolicy] = {"all": ALL_SLOTS, "first-three": FIRST_THREE}


class PipelineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoint: str = DEFAULT_ENDPOINT
    slot_policy: MinimumSlotPolicy = ALL_SLOTS
    show_update_notice: bool = False
    theme: IconStyleTheme = EMOJI_THEME
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


def load_config() -> PipelineConfig:
    """Build a PipelineConfig from WEATHER_* environment variables.

    Raises ValueError for unknown policy or theme names and non-boolean flags.
    """
    load_dotenv(find_dotenv(usecwd=True))

    policy_name = os.environ.get("WEATHER_SLOT_POLICY", "all").strip().lower()
    if policy_name not in SLOT_POLICIES:
        raise ValueError(f"Unknown WEATHER_SLOT_POLICY '{policy_name}', expected one of {sorted(SLOT_POLICIES)}")

    theme_name = os.environ.get("WEATHER_THEME", EMOJI_THEME.name).strip().lower()
    if theme_name not in THEMES:
        raise ValueError(f"Unknown WEATHER_THEME '{theme_name}', expected one of {sorted(THEMES)}")

    return PipelineConfig(
        endpoint=os.environ.get("WEATHER_API_URL", DEFAULT_ENDPOINT),
        slot_policy=SLOT_POLICIES[policy_name],
        show_update_notice=_parse_bool("WEATHER_SHOW_UPDATE_TIME", os.environ.get("WEATHER_SHOW_UPDATE_TIME", "")),
        theme=THEMES[theme_name],
        timeout_seconds=float(os.environ.get("WEATHER_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
    )


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got '{value}'")
