from __future__ import annotations

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import time
import uuid
from pathlib import Path

import uvicorn

from app.core.config import settings
from app.core.dependencies import FestivalsDep, get_festival_dataset, get_session_factory
from app.schemas.festivals import FestivalQueryParams, SearchCriteria, SearchResponse
from app.services.query_builder import fetch_festivals

from app.phase4.health_check import run_readiness_check, ReadinessResponse
from app.phase4.logger import service_logger
from app.phase5.meta_service import get_filter_metadata
from app.phase5.search_view import build_search_view


app = FastAPI(title="ArtoFest Festival Search Service", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.perf_counter()
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    response: Response = await call_next(request)

    process_time = time.perf_counter() - start_time
    service_logger.log_request(
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=process_time * 1000,
        request_id=request_id,
    )
    response.headers["X-Process-Time"] = str(process_time)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health", tags=["meta"])
def health() -> dict:
    return {"status": "ok"}


@app.get("/health/live", tags=["meta"])
def health_live() -> dict:
    return {"status": "ok"}


@app.get("/health/ready", response_model=ReadinessResponse, tags=["meta"])
def health_ready(request: Request) -> ReadinessResponse:
    return run_readiness_check(
        load_dataset=lambda: get_festival_dataset(request),
        get_factory=lambda: get_session_factory(request),
    )


@app.get("/api/v1/meta/filters", tags=["meta"])
def meta_filters(festivals: FestivalsDep) -> dict:
    """Returns the distinct countries, genres and places in the dataset."""
    return get_filter_metadata(festivals)


@app.get(
    "/api/v1/festivals/featured",
    response_model=SearchResponse,
    tags=["festivals"],
)
def featured_festivals(festivals: FestivalsDep) -> SearchResponse:
    return build_search_view(
        festivals,
        criteria=None,
        has_searched=False,
        featured_count=settings.FEATURED_COUNT,
    )


@app.post(
    "/api/v1/festivals/search",
    response_model=SearchResponse,
    tags=["festivals"],
)
def search(criteria: SearchCriteria, festivals: FestivalsDep) -> SearchResponse:
    return build_search_view(
        festivals,
        criteria=criteria,
        has_searched=True,
        featured_count=settings.FEATURED_COUNT,
    )


@app.get("/api/festivals", tags=["festivals"])
def list_festivals(request: Request, params: FestivalQueryParams = Depends()):
    request_id = getattr(request.state, "request_id", None)
    try:
        session_factory = get_session_factory(request)
        with session_factory() as session:
            rows = fetch_festivals(session, params)
    except Exception as e:
        service_logger.log_error(
            "Festival query failed",
            error=e,
            request_id=request_id,
            extra={"filters": params.model_dump(exclude_none=True)},
        )
        return JSONResponse(status_code=500, content={"message": "Server Error"})

    service_logger.log_query(
        params.model_dump(exclude_none=True), len(rows), request_id=request_id
    )
    return rows


def mount_images(target: FastAPI, directory: Path) -> bool:
    """Serve festival artwork under /images when `directory` exists."""
    if not directory.is_dir():
        return False
    target.mount("/images", StaticFiles(directory=directory), name="images")
    return True


mount_images(app, settings.IMAGES_DIR)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    run()
