from __future__ import annotations

from fastapi import FastAPI, HTTPException

from texttoslide.config import settings
from texttoslide.errors import ConfigError, GenerationError
from texttoslide.models import RawDocument, SlideRequest, SlideResponse
from texttoslide.pipeline import produce_deck
from texttoslide.strategies import build_strategy
from texttoslide.writer import render_deck

app = FastAPI(title="Text to Slide")


@app.get("/health")
def health() -> dict:
    return {"ok": True}


@app.post("/slides")
async def slides(req: SlideRequest) -> SlideResponse:
    try:
        strategy = build_strategy(settings, req.strategy)
        deck = await produce_deck(RawDocument(text=req.text), req.theme, strategy)
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    return SlideResponse(
        markdown=render_deck(deck),
        strategy=strategy.name,
        slide_count=None if deck.is_prerendered else len(deck.slides),
    )
