import pytest

from app.core.cors import DESKTOP_ORIGINS, allowed_origins, resolve_allow_origin


ALLOW = allowed_origins("https://cap.so")


@pytest.mark.parametrize("origin", ALLOW)
def test_allowed_origin_is_echoed(origin):
    assert resolve_allow_origin(origin, "https://api.internal", ALLOW) == origin


@pytest.mark.parametrize("origin", [None, "", "https://evil.example"])
def test_falls_back_to_request_origin(origin):
    assert resolve_allow_origin(origin, "https://cap.so", ALLOW) == "https://cap.so"


@pytest.mark.parametrize("origin", [None, "", "https://evil.example"])
def test_null_when_nothing_matches(origin):
    assert resolve_allow_origin(origin, "https://api.internal", ALLOW) == "null"


def test_origin_match_is_exact():
    assert resolve_allow_origin("https://cap.so/", "https://api.internal", ALLOW) == "null"
    assert resolve_allow_origin("TAURI://LOCALHOST", "https://api.internal", ALLOW) == "null"


def test_allowed_origins_without_public_url():
    assert allowed_origins(None) == DESKTOP_ORIGINS
    assert allowed_origins("https://cap.so") == ["https://cap.so"] + DESKTOP_ORIGINS
