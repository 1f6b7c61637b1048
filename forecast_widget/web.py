# ABOUTME: ASGI web entry point serving the forecast widget as HTML.
# ABOUTME: Creates a Starlette app that runs the pipeline once per page load and renders the outcome.

import logging
from html import escape

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from forecast_widget.config import PipelineConfig, load_config
from forecast_widget.fetch import Fetcher, create_fetcher, create_http_client
from forecast_widget.pipeline import present
from forecast_widget.render import HtmlRenderer

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="zh-Hant">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div class="weather-card">
{widget}
</div>
</body>
</html>
"""


def create_app(config: PipelineConfig | None = None, fetch: Fetcher | None = None) -> Starlette:
    """Build the widget app.

    Without an injected fetch capability, each request opens its own httpx client
    so runs share nothing.
    """
    config = config or load_config()
    renderer = HtmlRenderer(config.theme)

    async def render_widget() -> str:
        if fetch is not None:
            return await present(fetch, renderer, config)
        async with create_http_client(config.timeout_seconds) as client:
            return await present(create_fetcher(client), renderer, config)

    async def widget(request: Request) -> HTMLResponse:
        return HTMLResponse(await render_widget())

    async def page(request: Request) -> HTMLResponse:
        title = escape(config.theme.title_template.format(city="").strip())
        return HTMLResponse(PAGE_TEMPLATE.format(title=title, widget=await render_widget()))

    logger.info("Forecast widget serving %s with theme '%s'", config.endpoint, config.theme.name)
    return Starlette(routes=[Route("/", page), Route("/widget", widget)])
