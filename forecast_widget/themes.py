# ABOUTME: Display themes mapping icon categories and period labels to glyphs and wording.
# ABOUTME: Lets one renderer serve both widget variants by swapping the theme instead of the code.

from pydantic import BaseModel, ConfigDict

from forecast_widget.models import IconCategory, PeriodLabel


class IconStyleTheme(BaseModel):
    """Glyphs and UI strings for one visual variant of the widget."""

    model_config = ConfigDict(frozen=True)

    name: str
    icons: dict[IconCategory, str]
    periods: dict[PeriodLabel, str]
    title_template: str = "{city} 天氣預報"
    update_template: str = "更新時間：{update_time}"
    rain_label: str = "☔ 降雨機率"
    future_rain_label: str = "☔ 降雨"
    comfort_label: str = "😊 舒適度"
    error_template: str = "🚫 資料載入失敗: {message}，請檢查 API 網址是否正確。"

    def icon_for(self, category: IconCategory) -> str:
        return self.icons.get(category, self.icons[IconCategory.UNKNOWN])

    def period_for(self, label: PeriodLabel) -> str:
        return self.periods.get(label, self.periods[PeriodLabel.UNKNOWN])


EMOJI_THEME = IconStyleTheme(
    name="emoji",
    icons={
        IconCategory.CLEAR: "☀️",
        IconCategory.CLOUDY: "☁️",
        IconCategory.RAIN: "🌧️",
        IconCategory.THUNDER: "⛈️",
        IconCategory.SNOW: "❄️",
        IconCategory.FOG: "🌫️",
        IconCategory.UNKNOWN: "❓",
    },
    periods={
        PeriodLabel.MORNING: "🌅 早晨",
        PeriodLabel.AFTERNOON: "🏙️ 下午",
        PeriodLabel.EVENING: "🌃 晚上",
        PeriodLabel.UNKNOWN: "時段",
    },
)

PLAIN_THEME = IconStyleTheme(
    name="plain",
    icons={
        IconCategory.CLEAR: "🌞",
        IconCategory.CLOUDY: "⛅",
        IconCategory.RAIN: "☔",
        IconCategory.THUNDER: "🌩️",
        IconCategory.SNOW: "☃️",
        IconCategory.FOG: "🌁",
        IconCategory.UNKNOWN: "🌈",
    },
    periods={
        PeriodLabel.MORNING: "早上",
        PeriodLabel.AFTERNOON: "下午",
        PeriodLabel.EVENING: "晚上",
        PeriodLabel.UNKNOWN: "時段",
    },
    rain_label="降雨機率",
    future_rain_label="降雨",
    comfort_label="舒適度",
    error_template="無法取得天氣資料：{message}",
)

THEMES: dict[str, IconStyleTheme] = {t.name: t for t in (EMOJI_THEME, PLAIN_THEME)}
