# ABOUTME: Forecast pipeline: fetch, validate, pick current and future slots, build the view model.
# ABOUTME: One linear run per call; any failure ends the run with a typed PipelineError.

import json
import logging
from typing import Any

import httpx
import pydantic

from forecast_widget.classifier import classify_slot
from forecast_widget.config import PipelineConfig
from forecast_widget.errors import HttpError, MalformedPayloadError, PipelineError, TransportError, ValidationError
from forecast_widget.fetch import Fetcher
from forecast_widget.models import PipelineState, RawPayload, ViewModel
from forecast_widget.render import RenderSink

logger = logging.getLogger(__name__)


def _transition(state: PipelineState, new_state: PipelineState) -> PipelineState:
    logger.debug("Forecast pipeline %s -> %s", state, new_state)
    return new_state


async def run(fetch: Fetcher, config: PipelineConfig | None = None) -> ViewModel:
    """Fetch the configured endpoint once and turn the payload into a ViewModel.

    Raises:
        TransportError: the fetch capability could not reach the endpoint.
        HttpError: the endpoint answered with a non-2xx status.
        MalformedPayloadError: the body is not JSON or not shaped like a forecast payload.
        ValidationError: the payload reports failure or carries too few slots.
    """
    config = config or PipelineConfig()
    state = _transition(PipelineState.IDLE, PipelineState.FETCHING)
    try:
        try:
            resp = await fetch(config.endpoint)
        except (httpx.HTTPError, OSError) as e:
            raise TransportError(f"無法連線至 {config.endpoint}: {e}") from e
        if not resp.is_success:
            raise HttpError(resp.status_code)

        state = _transition(state, PipelineState.VALIDATING)
        payload = parse_payload(decode_body(resp.body), config)

        state = _transition(state, PipelineState.CLASSIFYING)
        view = build_view_model(payload, config)
    except PipelineError as e:
        _transition(state, PipelineState.FAILED)
        logger.warning("Forecast pipeline failed while %s: %s", state, e.message)
        raise

    _transition(state, PipelineState.DONE)
    return view


def decode_body(body: bytes | str) -> Any:
    """Parse a response body as JSON, raising MalformedPayloadError on failure."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedPayloadError(f"API 回傳資料不是有效的 JSON: {e}") from e


def parse_payload(data: Any, config: PipelineConfig | None = None) -> RawPayload:
    """Validate the `{success, data: {...}}` envelope and flatten it into a RawPayload.

    The success flag is checked before anything else, so a failed response is a
    ValidationError no matter what its forecasts look like.
    """
    config = config or PipelineConfig()
    if not isinstance(data, dict):
        raise MalformedPayloadError(f"API 回傳資料格式錯誤: 預期為 JSON 物件，實際為 {type(data).__name__}")

    if data.get("success") is not True:
        raise ValidationError("API 回傳失敗或缺少 success 欄位")

    inner = data.get("data")
    if not isinstance(inner, dict) or not inner.get("forecasts"):
        raise ValidationError("API 回傳資料格式錯誤或無預報資料")

    try:
        payload = RawPayload.model_validate({"success": True, **inner})
    except pydantic.ValidationError as e:
        raise MalformedPayloadError(f"API 回傳資料格式錯誤: {e}") from e

    minimum = config.slot_policy.minimum
    if len(payload.forecasts) < minimum:
        raise ValidationError(f"預報時段不足: 至少需要 {minimum} 個，實際只有 {len(payload.forecasts)} 個")
    return payload


def build_view_model(payload: RawPayload, config: PipelineConfig | None = None) -> ViewModel:
    """Classify the working slots: the first is current, the rest are future in original order."""
    config = config or PipelineConfig()
    working = config.slot_policy.select(payload.forecasts)
    if not working:
        raise ValidationError("API 回傳資料格式錯誤或無預報資料")

    update_notice = None
    if config.show_update_notice and payload.update_time:
        update_notice = config.theme.update_template.format(update_time=payload.update_time)

    return ViewModel(
        city_name=payload.city,
        update_notice=update_notice,
        current=classify_slot(working[0]),
        future=[classify_slot(slot) for slot in working[1:]],
    )


async def present(fetch: Fetcher, sink: RenderSink, config: PipelineConfig | None = None) -> Any:
    """Run the pipeline once and hand the outcome to the sink.

    Returns whatever the sink returns for the view model or the error.
    """
    try:
        view = await run(fetch, config)
    except PipelineError as e:
        return sink.render_error(e)
    return sink.render(view)
