from typing import Dict
from fastapi import Request

ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"

def cors_headers(request: Request) -> Dict[str, str]:
    # echo the caller's Origin; "*" when the header is absent or empty
    origin = request.headers.get("origin") or "*"
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }
