"""FastAPI application that turns posted activity periods into reports."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .aggregator import aggregate
from .config import ReportSettings
from .errors import ConfigurationError, InvalidInputError
from .loader import ActivityPeriodPayload
from .models import FinalReport
from .rules import RULE_CATALOG

logger = logging.getLogger(__name__)


def create_app(*, settings: Optional[ReportSettings] = None) -> FastAPI:
    """Instantiate the FastAPI application."""
    resolved_settings = settings or ReportSettings()

    app = FastAPI(title="Activity Report", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = resolved_settings

    @app.get("/api/status")
    def status(request: Request) -> Dict[str, Any]:
        current: ReportSettings = request.app.state.settings
        return {
            "platform": current.platform,
            "rules": len(RULE_CATALOG),
            "version": __version__,
        }

    @app.get("/api/rules")
    def list_rules(
        platform: Optional[str] = Query(
            default=None, description="Only list rules for this OS tag."
        ),
    ) -> Dict[str, Any]:
        return {
            "rules": [
                {
                    "position": position,
                    "family": rule.family,
                    "operating_system": rule.operating_system,
                    "executable_matchers": list(rule.executable_matchers),
                    "program": rule.program_label,
                }
                for position, rule in enumerate(RULE_CATALOG)
                if platform is None or rule.operating_system == platform
            ]
        }

    @app.post(
        "/api/reports",
        response_model=FinalReport,
        response_model_exclude_none=True,
    )
    def create_report(
        payload: list[ActivityPeriodPayload],
        request: Request,
        platform: Optional[str] = Query(
            default=None, description="OS tag used to pick rules; defaults to the server's."
        ),
    ) -> FinalReport:
        current: ReportSettings = request.app.state.settings
        if platform is not None:
            try:
                current = current.with_platform(platform)
            except ValueError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc

        periods = [item.to_period() for item in payload]
        try:
            return aggregate(periods, current)
        except InvalidInputError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ConfigurationError as exc:
            logger.error("Rule catalog misconfigured: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    return app
