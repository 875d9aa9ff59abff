"""FastAPI entrypoint for the Notelink backend."""

from __future__ import annotations

import asyncio
import traceback

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import configure_logging, server_address
from errors import RecommendationError
from models import (
    RankHeadingsRequest,
    RankNotesRequest,
    RecommendationsResponsePayload,
    SimilarityRequest,
    SimilarityResponsePayload,
)
from services import RecommendationService

configure_logging()

app = FastAPI(title="Notelink Backend", description="Note and heading recommendation API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

recommendation_service = RecommendationService()


@app.exception_handler(RecommendationError)
async def recommendation_error_handler(request: Request, exc: RecommendationError):
    return JSONResponse(status_code=422, content={"detail": str(exc), "error": exc.kind})


@app.get("/", tags=["health"])
async def root():
    return {"status": "ok", "message": "Notelink backend is running"}


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok", "message": "Notelink backend is running"}


@app.post("/similarity", response_model=SimilarityResponsePayload, tags=["similarity"])
async def similarity(request: SimilarityRequest):
    try:
        value = recommendation_service.similarity(request)
        return SimilarityResponsePayload(similarity=value)
    except RecommendationError:
        raise
    except Exception as exc:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(exc))


@app.post("/recommend/headings", response_model=RecommendationsResponsePayload, tags=["recommend"])
async def rank_headings(request: RankHeadingsRequest):
    try:
        scores = await asyncio.to_thread(recommendation_service.rank_headings, request)
        return RecommendationsResponsePayload(recommendations=scores)
    except RecommendationError:
        raise
    except Exception as exc:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(exc))


@app.post("/recommend/notes", response_model=RecommendationsResponsePayload, tags=["recommend"])
async def rank_notes(request: RankNotesRequest):
    try:
        scores = await asyncio.to_thread(recommendation_service.rank_notes, request)
        return RecommendationsResponsePayload(recommendations=scores)
    except RecommendationError:
        raise
    except Exception as exc:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(exc))


if __name__ == "__main__":
    host, port = server_address()
    uvicorn.run(app, host=host, port=port)
