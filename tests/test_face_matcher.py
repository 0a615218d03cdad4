import asyncio
import json

import httpx
import pytest

from presensi.core.exceptions import FaceServiceError, FaceServiceNotConfigured
from presensi.core.face_matcher import VisionFaceComparator, parse_verdict


@pytest.mark.parametrize("text", ["MATCH", " MATCH\n", "\tMATCH "])
def test_exact_match_is_verified(text):
    assert parse_verdict(text) is True


@pytest.mark.parametrize(
    "text",
    ["NO_MATCH", "", "   ", "match", "MATCH.", "MATCHED", "It is a MATCH", "NO MATCH", None, 1, ["MATCH"]],
)
def test_anything_else_fails_closed(text):
    assert parse_verdict(text) is False


def _comparator(handler):
    return VisionFaceComparator(
        api_url="https://ai.test/v1/chat/completions",
        api_key="test-key",
        model="vision-model",
        transport=httpx.MockTransport(handler),
    )


def _chat_response(content):
    return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


def test_compare_sends_both_images_and_strict_instruction():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return _chat_response("MATCH")

    verdict = asyncio.run(_comparator(handler).compare("https://img/ref.jpg", "data:image/jpeg;base64,AAA"))

    assert verdict.verified is True
    assert seen["auth"] == "Bearer test-key"
    content = seen["body"]["messages"][0]["content"]
    assert seen["body"]["model"] == "vision-model"
    assert content[0]["type"] == "text"
    assert '"MATCH"' in content[0]["text"] and '"NO_MATCH"' in content[0]["text"]
    assert content[1]["image_url"]["url"] == "https://img/ref.jpg"
    assert content[2]["image_url"]["url"] == "data:image/jpeg;base64,AAA"


@pytest.mark.parametrize(
    "response",
    [
        _chat_response("NO_MATCH"),
        _chat_response(None),
        httpx.Response(200, json={"choices": []}),
        httpx.Response(200, json={"unexpected": True}),
        httpx.Response(200, text="not json"),
    ],
)
def test_compare_malformed_or_negative_answer_is_no_match(response):
    verdict = asyncio.run(_comparator(lambda request: response).compare("ref", "cand"))
    assert verdict.verified is False


def test_compare_non_2xx_raises():
    comparator = _comparator(lambda request: httpx.Response(429, text="rate limited"))
    with pytest.raises(FaceServiceError) as exc:
        asyncio.run(comparator.compare("ref", "cand"))
    assert exc.value.status_code == 429


def test_compare_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FaceServiceError):
        asyncio.run(_comparator(handler).compare("ref", "cand"))


def test_compare_without_key_is_not_configured(monkeypatch):
    from presensi.core import face_matcher

    monkeypatch.setattr(face_matcher.settings, "AI_API_KEY", None)
    comparator = VisionFaceComparator()
    assert not comparator.configured
    with pytest.raises(FaceServiceNotConfigured):
        asyncio.run(comparator.compare("ref", "cand"))


def test_comparator_base_is_abstract():
    from presensi.core.face_matcher import FaceComparator

    with pytest.raises(TypeError):
        FaceComparator()
