from __future__ import annotations
from typing import Callable, Dict, List

from pydantic import BaseModel
from sqlalchemy.orm import Session, sessionmaker

from app.phase3.database import ping
from app.schemas.festivals import Festival


class DependencyStatus(BaseModel):
    status: str
    details: str | None = None


class ReadinessResponse(BaseModel):
    status: str
    dependencies: Dict[str, DependencyStatus]


def check_dataset_status(load_dataset: Callable[[], List[Festival]]) -> DependencyStatus:
    try:
        festivals = load_dataset()
        if festivals:
            return DependencyStatus(status="ok", details=f"Dataset loaded with {len(festivals)} festivals")
        return DependencyStatus(status="error", details="Dataset is empty")
    except Exception as e:
        return DependencyStatus(status="error", details=str(e))


def check_database_status(get_factory: Callable[[], sessionmaker[Session]]) -> DependencyStatus:
    try:
        session_factory = get_factory()
        with session_factory() as session:
            ping(session)
        return DependencyStatus(status="ok", details="Database connection succeeded")
    except Exception as e:
        return DependencyStatus(status="error", details=type(e).__name__)


def run_readiness_check(
    load_dataset: Callable[[], List[Festival]],
    get_factory: Callable[[], sessionmaker[Session]],
) -> ReadinessResponse:
    dataset_status = check_dataset_status(load_dataset)
    database_status = check_database_status(get_factory)

    total_status = "ready"
    if dataset_status.status == "error" or database_status.status == "error":
        total_status = "not_ready"

    return ReadinessResponse(
        status=total_status,
        dependencies={
            "dataset": dataset_status,
            "database": database_status,
        },
    )
