"""CORS headers for the desktop app endpoints.

The desktop client is a Tauri webview, so besides the public web URL the
allow-list contains the Tauri and local development origins. Every response
of an endpoint, including the preflight and error paths, must carry headers
built by ``cors_headers`` so the computed origin stays consistent.
"""

from typing import Dict, Iterable, List, Optional

from fastapi import Request


DESKTOP_ORIGINS = [
    "http://localhost:3001",
    "tauri://localhost",
    "http://tauri.localhost",
    "https://tauri.localhost",
]

ALLOW_HEADERS = "Authorization, sentry-trace, baggage"


def allowed_origins(public_url: Optional[str]) -> List[str]:
    """Public URL (when configured) followed by the fixed desktop origins."""
    origins = [public_url] if public_url else []
    return origins + DESKTOP_ORIGINS


def resolve_allow_origin(origin: Optional[str], request_origin: str, allow_list: Iterable[str]) -> str:
    """Allowed `origin` if listed, else the request origin if listed, else "null"."""
    allow = set(allow_list)
    if origin and origin in allow:
        return origin
    if request_origin in allow:
        return request_origin
    return "null"


def request_origin(request: Request) -> str:
    """``scheme://host[:port]`` the request was addressed to."""
    return f"{request.url.scheme}://{request.url.netloc}"


def cors_headers(
    request: Request,
    public_url: Optional[str],
    methods: str = "GET, OPTIONS",
) -> Dict[str, str]:
    """Build the CORS response headers for a request carrying an ``origin`` query parameter."""
    allow_origin = resolve_allow_origin(
        request.query_params.get("origin"),
        request_origin(request),
        allowed_origins(public_url),
    )
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": methods,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }
