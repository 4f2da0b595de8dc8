"""Tests for Shorts detection."""

from __future__ import annotations

import httpx
import pytest

from blepo.infrastructure.youtube.shorts_detector import HttpShortsDetector


def _detector(handler) -> HttpShortsDetector:
    return HttpShortsDetector(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestHttpShortsDetector:
    """Tests for HttpShortsDetector."""

    @pytest.mark.asyncio
    async def test_200_is_short(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        assert await _detector(handler).is_short("abc123") is True
        assert requests[0].method == "HEAD"
        assert str(requests[0].url) == "https://www.youtube.com/shorts/abc123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [204, 301, 302, 303, 404, 429, 500])
    async def test_other_status_is_not_short(self, status: int) -> None:
        detector = _detector(lambda request: httpx.Response(status))
        assert await detector.is_short("abc123") is False

    @pytest.mark.asyncio
    async def test_redirect_is_not_followed(self) -> None:
        """A regular video redirects to its watch page, which must not count."""
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            if request.url.path.startswith("/shorts/"):
                return httpx.Response(303, headers={"Location": "https://www.youtube.com/watch?v=abc123"})
            return httpx.Response(200)

        assert await _detector(handler).is_short("abc123") is False
        assert seen == ["/shorts/abc123"]

    @pytest.mark.asyncio
    async def test_transport_error_is_not_short(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        assert await _detector(handler).is_short("abc123") is False

    @pytest.mark.asyncio
    async def test_unexpected_error_is_not_short(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("unexpected")

        assert await _detector(handler).is_short("abc123") is False
