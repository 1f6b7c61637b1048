# ABOUTME: httpx-backed fetch capability injected into the forecast pipeline.
# ABOUTME: Turns an endpoint URL into a FetchResponse and maps transport failures to TransportError.

from collections.abc import Awaitable, Callable

import httpx

from forecast_widget.config import DEFAULT_TIMEOUT_SECONDS
from forecast_widget.errors import TransportError
from forecast_widget.models import FetchResponse

Fetcher = Callable[[str], Awaitable[FetchResponse]]


def create_http_client(
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an httpx client for the forecast endpoint.

    No retry transport: a failed request ends the run and the page is reloaded to try again.
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds), follow_redirects=True, transport=transport)


def create_fetcher(client: httpx.AsyncClient) -> Fetcher:
    """Wrap an httpx client as a fetch capability.

    Non-2xx responses are returned as-is; deciding what they mean is the pipeline's job.
    """

    async def fetch(url: str) -> FetchResponse:
        try:
            resp = await client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"無法連線至 {url}: {e}") from e
        return FetchResponse(status_code=resp.status_code, body=resp.content)

    return fetch
