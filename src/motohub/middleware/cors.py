"""CORS for the web client.

Production allows only ``cors_origins``. With ``debug`` on, any localhost
port is accepted as well so local front-end dev servers work unconfigured.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from motohub.config import Settings

LOCAL_ORIGIN_PATTERN = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"


def setup_cors(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=LOCAL_ORIGIN_PATTERN if settings.debug else None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-Id"],
        expose_headers=["X-Request-Id", "X-RateLimit-Remaining", "X-RateLimit-Limit"],
    )
