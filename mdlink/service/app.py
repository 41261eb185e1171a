"""FastAPI application entrypoint for mdlink service mode."""

from __future__ import annotations

import argparse
import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError, LinkConfig, load_config
from ..inputs import strip_tel_scheme
from ..logging import configure_logging
from ..pipeline import Decision, explain
from ..renderers import RenderError


class ConvertRequest(BaseModel):
    text: str


class DetectionModel(BaseModel):
    kind: str
    confidence: int
    attributes: dict


class ConvertResponse(BaseModel):
    markdown: str
    kind: Optional[str] = None
    renderer: Optional[str] = None
    score: int = 0
    detections: List[DetectionModel] = []


class HealthResponse(BaseModel):
    status: str


def create_app(
    config_factory: Callable[[], LinkConfig] = load_config,
) -> FastAPI:
    """Create the FastAPI application exposing the conversion pipeline."""

    app = FastAPI(title="mdlink Service", version="1.0.0")

    async def get_config_factory() -> Callable[[], LinkConfig]:
        return config_factory

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/convert", response_model=ConvertResponse)
    async def convert_text(
        payload: ConvertRequest,
        load: Callable[[], LinkConfig] = Depends(get_config_factory),
    ) -> ConvertResponse:
        def _run() -> tuple[Decision, str]:
            # Reload per request so edits to config.yaml apply without a restart.
            config = load()
            decision = explain(strip_tel_scheme(payload.text), config)
            return decision, decision.render()

        loop = asyncio.get_running_loop()
        decision, markdown = await loop.run_in_executor(None, _run)
        return _to_response(decision, markdown)

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500, content={"detail": f"failed to load config: {exc}"}
        )

    @app.exception_handler(RenderError)
    async def render_error_handler(
        _: Any, exc: RenderError
    ) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


def _to_response(decision: Decision, markdown: str) -> ConvertResponse:
    detections = [
        DetectionModel(
            kind=detection.kind.value,
            confidence=detection.confidence,
            attributes=detection.attributes(),
        )
        for detection in decision.detections
    ]
    winner = decision.winner
    if winner is None:
        return ConvertResponse(markdown=markdown, detections=detections)
    return ConvertResponse(
        markdown=markdown,
        kind=winner.detection.kind.value,
        renderer=winner.renderer.name,
        score=winner.score,
        detections=detections,
    )


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install mdlink[service]`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)


def main(argv: list[str] | None = None) -> None:  # pragma: no cover - integration path
    """Console entrypoint for ``mdlink-serve``."""
    parser = argparse.ArgumentParser(
        prog="mdlink-serve",
        description="Serve the mdlink conversion pipeline over HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))
    run_service(host=args.host, port=args.port)
