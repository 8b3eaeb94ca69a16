"""Doticon HTTP API

Serves identicon colours as JSON and rendered icons as PNG.
Example:
    uvicorn doticon.server:app --port 8002
"""
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Response, status
from fastapi.middleware.cors import CORSMiddleware

from .crypto import public_key_seed
from .generator import explain
from .render import identicon_png
from .schemas import IdenticonResponse
from .settings import get_settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Doticon API", version="0.1.0")
settings = get_settings()

origins = [o.strip() for o in settings.allowed_origins.split(',')]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _seed(seed: str, encoding: str) -> bytes | str:
    if encoding == "hex":
        try:
            return public_key_seed(seed)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return seed


def _colors_response(seed: str, value) -> IdenticonResponse:
    derivation = explain(value)
    return IdenticonResponse.build(seed, derivation.result, derivation.scheme.name)


@app.get('/health')
def health():
    return {"status": "ok"}


@app.get('/identicon/colors', response_model=IdenticonResponse)
def identicon_colors(seed: str = Query(""), encoding: str = Query("utf8", pattern="^(utf8|hex)$")):
    return _colors_response(seed, _seed(seed, encoding))


@app.get('/identicon/key/{public_key}', response_model=IdenticonResponse)
def identicon_for_key(public_key: str):
    return _colors_response(public_key, _seed(public_key, "hex"))


@app.get('/identicon.png')
def identicon_image(
    seed: str = Query(""),
    encoding: str = Query("utf8", pattern="^(utf8|hex)$"),
    size: Optional[int] = Query(None),
):
    if size is not None and not 1 <= size <= settings.max_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"size must be between 1 and {settings.max_size}",
        )
    content = identicon_png(_seed(seed, encoding), size)
    logger.debug("rendered identicon png (%d bytes)", len(content))
    return Response(content, media_type='image/png')
