"""Shorts detection by probing the ``/shorts/`` URL."""

from __future__ import annotations

import logging

import httpx

from blepo.domain.services.shorts_detector import ShortsDetector

logger = logging.getLogger(__name__)

SHORTS_URL_TEMPLATE = "https://www.youtube.com/shorts/{video_id}"


class HttpShortsDetector(ShortsDetector):
    """
    Classifies a video as a Short when its ``/shorts/`` URL answers 200.

    Regular uploads redirect from that URL to the watch page, so redirects
    must not be followed.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 15.0,
        user_agent: str = "blepo/0.1",
    ) -> None:
        self.client = client
        self.timeout = timeout
        self.user_agent = user_agent

    async def is_short(self, video_id: str) -> bool:
        url = SHORTS_URL_TEMPLATE.format(video_id=video_id)
        try:
            if self.client is not None:
                response = await self.client.head(url, follow_redirects=False)
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout, headers={"User-Agent": self.user_agent}
                ) as client:
                    response = await client.head(url, follow_redirects=False)
        except Exception as e:
            logger.debug("Shorts probe for %s failed: %s", video_id, e)
            return False

        return response.status_code == 200
