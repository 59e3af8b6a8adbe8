"""FastAPI application that exposes the pen analytics engine over HTTP."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .analytics import calculate_problem_solving_analytics
from .config import TimelineSettings
from .models import ProblemSolvingAnalytics
from .reporting import build_breakdown
from .schemas import AnalyticsRequest, TimelineRequest
from .timeline import build_segments

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


def create_app(*, settings: Optional[TimelineSettings] = None) -> FastAPI:
    """Instantiate the FastAPI application."""
    resolved_settings = settings or TimelineSettings()

    app = FastAPI(title="Pen Analytics", version=API_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.timeline_settings = resolved_settings

    @app.get("/api/status")
    def status(request: Request) -> Dict[str, Any]:
        current: TimelineSettings = request.app.state.timeline_settings
        return {
            "version": API_VERSION,
            "rework_threshold_seconds": current.rework_threshold.total_seconds(),
            "merge_window_seconds": current.merge_window.total_seconds(),
        }

    @app.post("/api/analytics")
    def analytics(payload: AnalyticsRequest) -> Dict[str, Any]:
        segments = [item.to_segment() for item in payload.segments]
        result = calculate_problem_solving_analytics(
            segments, payload.first_reaction_time
        )
        return _analytics_payload(result)

    @app.post("/api/timeline")
    def timeline(payload: TimelineRequest, request: Request) -> Dict[str, Any]:
        records = [item.to_segment() for item in payload.records]
        try:
            segments = build_segments(
                records,
                request.app.state.timeline_settings,
                session_end=payload.session_end,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.info("Built %d segments from %d records.", len(segments), len(records))
        result = calculate_problem_solving_analytics(
            segments, payload.first_reaction_time
        )
        return {
            "segments": [segment.to_dict() for segment in segments],
            **_analytics_payload(result),
        }

    return app


def _analytics_payload(result: ProblemSolvingAnalytics) -> Dict[str, Any]:
    return {
        "analytics": result.to_dict(),
        "breakdown": build_breakdown(result),
    }
