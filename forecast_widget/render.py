# ABOUTME: Render sink interface and the HTML renderer for the forecast widget.
# ABOUTME: Turns a ViewModel or PipelineError into escaped HTML fragments using a display theme.

from html import escape
from typing import Any, Protocol

from forecast_widget.errors import PipelineError
from forecast_widget.models import ClassifiedSlot, ViewModel
from forecast_widget.themes import EMOJI_THEME, IconStyleTheme


class RenderSink(Protocol):
    """Anything that can draw a finished run, successful or not."""

    def render(self, view: ViewModel) -> Any: ...

    def render_error(self, error: PipelineError) -> Any: ...


class HtmlRenderer:
    """Render sink producing the widget markup: a highlighted current block and a grid of future blocks."""

    def __init__(self, theme: IconStyleTheme = EMOJI_THEME):
        self.theme = theme

    def render(self, view: ViewModel) -> str:
        parts = [f'<h1 id="city-name">{escape(self.theme.title_template.format(city=view.city_name))}</h1>']
        if view.update_notice:
            parts.append(f'<div class="update-notice">{escape(view.update_notice)}</div>')
        parts.append(self.render_main(view.current))
        if view.future:
            parts.append(self.render_future(view.future))
        return "\n".join(parts)

    def render_main(self, slot: ClassifiedSlot) -> str:
        t = self.theme
        return (
            '<div id="main-forecast">\n'
            f'    <div class="main-time-text">{escape(t.period_for(slot.period_label))}</div>\n'
            f'    <div class="main-icon">{t.icon_for(slot.icon)}</div>\n'
            f'    <div class="main-weather-text">{escape(slot.weather)}</div>\n'
            f'    <div class="main-temp-text">{escape(slot.temperature_range)}</div>\n'
            '    <div class="main-detail-row">\n'
            f"        <div>{escape(t.rain_label)}: <strong>{escape(slot.rain)}</strong></div>\n"
            "    </div>\n"
            f'    <div class="comfort-text">{escape(t.comfort_label)}：{escape(slot.comfort)}</div>\n'
            "</div>"
        )

    def render_future(self, slots: list[ClassifiedSlot]) -> str:
        t = self.theme
        blocks = [
            '    <div class="future-block">\n'
            f'        <div class="future-time-text">{escape(t.period_for(slot.period_label))}</div>\n'
            f'        <div class="future-icon">{t.icon_for(slot.icon)}</div>\n'
            f'        <div class="future-weather-text">{escape(slot.weather)}</div>\n'
            f'        <div class="future-temp-text">{escape(slot.temperature_range)}</div>\n'
            f'        <div class="future-rain-text">{escape(t.future_rain_label)}: {escape(slot.rain)}</div>\n'
            "    </div>"
            for slot in slots
        ]
        return '<div id="future-forecasts">\n' + "\n".join(blocks) + "\n</div>"

    def render_error(self, error: PipelineError) -> str:
        message = self.theme.error_template.format(message=error.message)
        return f'<div id="error-message">{escape(message)}</div>'
