"""
/cors-proxy — permissive CORS endpoint.
OPTIONS preflights are answered immediately with the allow-* headers.
"""
from fastapi import APIRouter, Response

router = APIRouter()

ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
ALLOW_HEADERS = ["Content-Type", "Authorization"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(ALLOW_METHODS),
    "Access-Control-Allow-Headers": ", ".join(ALLOW_HEADERS),
}


@router.api_route("/cors-proxy", methods=ALLOW_METHODS)
def cors_proxy():
    # Nothing sits behind the proxy path; every method gets the bare headers.
    return Response(status_code=200, headers=CORS_HEADERS)
