# ABOUTME: Integration tests for the Starlette web entry point.
# ABOUTME: Uses TestClient with an injected fetch capability so no real network calls are made.

import httpx
from starlette.testclient import TestClient

from forecast_widget.config import FIRST_THREE, PipelineConfig
from forecast_widget.fetch import create_fetcher, create_http_client
from forecast_widget.themes import PLAIN_THEME
from forecast_widget.web import create_app
from tests.payloads import SLOT_EVENING, SLOT_MORNING, SLOT_NIGHT, make_fetch, make_payload


class TestWidgetRoute:
    def test_renders_fragment(self):
        """GET /widget returns only the widget markup.

        Implementation: Injects a fetch double serving three slots.
        Passing implies: The app runs the pipeline per request and renders with the configured theme.
        """
        fetch = make_fetch(make_payload(SLOT_MORNING, SLOT_EVENING, SLOT_NIGHT))
        client = TestClient(create_app(PipelineConfig(), fetch=fetch))

        resp = client.get("/widget")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert 'id="main-forecast"' in resp.text
        assert resp.text.count('class="future-block"') == 2
        assert "<!DOCTYPE html>" not in resp.text

    def test_runs_pipeline_per_request(self):
        fetch = make_fetch(make_payload(SLOT_MORNING))
        client = TestClient(create_app(PipelineConfig(), fetch=fetch))

        client.get("/widget")
        client.get("/widget")

        assert fetch.await_count == 2

    def test_failure_renders_error_message(self):
        """A pipeline failure is rendered, not turned into a server error.

        Implementation: Configures the first-three policy and serves a single slot.
        Passing implies: Users see the themed error text with HTTP 200, as the page shows it.
        """
        fetch = make_fetch(make_payload(SLOT_MORNING))
        client = TestClient(create_app(PipelineConfig(slot_policy=FIRST_THREE, theme=PLAIN_THEME), fetch=fetch))

        resp = client.get("/widget")

        assert resp.status_code == 200
        assert 'id="error-message"' in resp.text
        assert "無法取得天氣資料" in resp.text


class TestPageRoute:
    def test_wraps_widget_in_page(self):
        fetch = make_fetch(make_payload(SLOT_MORNING))
        client = TestClient(create_app(PipelineConfig(), fetch=fetch))

        resp = client.get("/")

        assert resp.status_code == 200
        assert resp.text.startswith("<!DOCTYPE html>")
        assert "<title>天氣預報</title>" in resp.text
        assert "高雄市 天氣預報" in resp.text

    def test_http_error_page(self):
        client = TestClient(create_app(PipelineConfig(), fetch=make_fetch(b"", status_code=500)))

        resp = client.get("/")

        assert "HTTP 錯誤! 狀態碼: 500" in resp.text

    def test_redirect_loop_renders_error_message(self):
        """A request error deep inside httpx still reaches the page as the themed message.

        Implementation: Wires a real httpx fetcher over a MockTransport that redirects to itself.
        Passing implies: Every request failure is typed, so the app never answers with a bare 500.
        """
        http_client = create_http_client(
            transport=httpx.MockTransport(lambda request: httpx.Response(302, headers={"location": str(request.url)}))
        )
        config = PipelineConfig(endpoint="https://test/weather")
        client = TestClient(create_app(config, fetch=create_fetcher(http_client)))

        resp = client.get("/widget")

        assert resp.status_code == 200
        assert "🚫 資料載入失敗: 無法連線至 https://test/weather" in resp.text

    def test_missing_forecasts_page_wording(self):
        client = TestClient(create_app(PipelineConfig(), fetch=make_fetch(make_payload())))

        resp = client.get("/")

        assert "🚫 資料載入失敗: API 回傳資料格式錯誤或無預報資料，請檢查 API 網址是否正確。" in resp.text
