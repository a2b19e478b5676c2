"""Client for the Dub short-link API."""

import logging
from typing import Any, Optional

import httpx
from fastapi import Depends

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


class DubService:
    """Registers share links (``<PUBLIC_URL>/s/<video_id>``) with Dub.

    Link registration is best effort: errors are logged and never raised, so
    ``create_link`` is safe to run as a fire-and-forget background task.
    """

    def __init__(self, config: Settings, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.client = client

    def share_url(self, video_id: str) -> str:
        return f"{self.config.PUBLIC_URL or ''}/s/{video_id}"

    async def create_link(self, video_id: str) -> Optional[Any]:
        """POST the link for a video. Returns the decoded response, or None on failure."""
        payload = {"url": self.share_url(video_id), "key": video_id}
        headers = {
            "Authorization": f"Bearer {self.config.DUB_API_KEY}",
            "Content-Type": "application/json",
        }
        params = {"projectSlug": self.config.DUB_PROJECT_SLUG}

        try:
            if self.client is not None:
                res = await self.client.post(
                    self.config.DUB_API_URL, params=params, json=payload, headers=headers
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.DUB_TIMEOUT_SECONDS) as client:
                    res = await client.post(
                        self.config.DUB_API_URL, params=params, json=payload, headers=headers
                    )

            data = res.json()
            if res.is_error:
                logger.warning("Dub link for %s returned %s: %s", video_id, res.status_code, data)
            else:
                logger.info("Dub link created for %s: %s", video_id, data)
            return data
        except Exception as e:
            logger.error("Error creating Dub link for %s: %s", video_id, e)
            return None


def get_dub_service(config: Settings = Depends(get_settings)) -> DubService:
    """FastAPI dependency for the short-link client."""
    return DubService(config)
