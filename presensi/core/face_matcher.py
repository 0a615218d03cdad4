# presensi/core/face_matcher.py
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx

from presensi.core.config import settings
from presensi.core.exceptions import FaceServiceError, FaceServiceNotConfigured

logger = logging.getLogger(__name__)

MATCH = "MATCH"
NO_MATCH = "NO_MATCH"

COMPARE_PROMPT = (
    "Compare these two face images and determine if they are the same person. "
    'Respond with ONLY "MATCH" if they are the same person, or "NO_MATCH" if they '
    "are different people. Consider facial features, structure, and overall "
    "appearance. Be strict in your comparison for security purposes."
)


@dataclass(frozen=True)
class MatchVerdict:
    verified: bool
    raw: str = ""


def parse_verdict(text) -> bool:
    """Only an exact MATCH counts, everything else is NO_MATCH."""
    if not isinstance(text, str):
        return False
    return text.strip() == MATCH


class FaceComparator(ABC):
    """Compares a stored reference image with a freshly captured one."""

    configured = True

    @abstractmethod
    async def compare(self, reference_image: str, candidate_image: str) -> MatchVerdict:
        ...


class VisionFaceComparator(FaceComparator):
    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url or settings.AI_GATEWAY_URL
        self.api_key = api_key or settings.AI_API_KEY
        self.model = model or settings.AI_MODEL
        self.timeout = timeout or httpx.Timeout(
            settings.AI_CONNECT_TIMEOUT, read=settings.AI_READ_TIMEOUT
        )
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, reference_image: str, candidate_image: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": COMPARE_PROMPT},
                        {"type": "image_url", "image_url": {"url": reference_image}},
                        {"type": "image_url", "image_url": {"url": candidate_image}},
                    ],
                }
            ],
        }

    async def compare(self, reference_image: str, candidate_image: str) -> MatchVerdict:
        if not self.configured:
            raise FaceServiceNotConfigured("AI verification service not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(reference_image, candidate_image)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                logger.info(f"📡 [FACE] Sending comparison request to {self.api_url}")
                response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"❌ [FACE] Transport error: {e!r}")
            raise FaceServiceError(f"AI verification service error: {e}") from e

        if response.status_code != 200:
            logger.error(f"❌ [FACE] API error: {response.status_code} — {response.text}")
            raise FaceServiceError(
                "AI verification service error", status_code=response.status_code
            )

        verdict = ""
        try:
            verdict = response.json()["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError):
            logger.error(f"❌ [FACE] Unexpected response format: {response.text}")

        if not isinstance(verdict, str):
            verdict = ""

        logger.info(f"✅ [FACE] Verdict: {verdict!r}")
        return MatchVerdict(verified=parse_verdict(verdict), raw=verdict)


def get_face_comparator() -> FaceComparator:
    return VisionFaceComparator()
