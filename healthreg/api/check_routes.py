"""Check registry API routes.

Endpoints:
  POST   /api/health/checks        register an endpoint
  GET    /api/health/checks        paged list (?page=N, 1-based)
  GET    /api/health/checks/{id}   one check
  DELETE /api/health/checks/{id}   unregister
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from healthreg.checks.errors import (
    CheckNotFoundError,
    DuplicateIDError,
    InvalidEndpointError,
    InvalidIDError,
    StoreError,
)
from healthreg.checks.service import CheckService

logger = logging.getLogger(__name__)

check_router = APIRouter(prefix="/health", tags=["checks"])


# ── Request models ───────────────────────────────────────────────────────

class CreateCheckBody(BaseModel):
    endpoint: str = ""


# ── Helper ───────────────────────────────────────────────────────────────

def _get_service(request: Request) -> CheckService:
    return request.app.state.check_service  # type: ignore[no-any-return]


def _unexpected(action: str) -> HTTPException:
    logger.exception("Check store failed during %s", action)
    return HTTPException(status_code=500, detail="unexpected error")


# ── Endpoints ────────────────────────────────────────────────────────────

@check_router.post("/checks", status_code=201)
def create_check(body: CreateCheckBody, request: Request) -> dict[str, Any]:
    """Register an endpoint."""
    svc = _get_service(request)
    try:
        check = svc.create(body.endpoint)
    except (InvalidEndpointError, DuplicateIDError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StoreError:
        raise _unexpected("create")
    return {"id": check.id, "endpoint": check.endpoint}


@check_router.get("/checks")
def list_checks(request: Request, page: str = "") -> dict[str, Any]:
    """List registered checks a page at a time; an unparsable page is page 1."""
    svc = _get_service(request)
    try:
        page_num = int(page)
    except ValueError:
        page_num = 0
    total, current, checks = svc.list(page_num)
    return {
        "items": [c.to_dict() for c in checks],
        "page": current,
        "total": total,
        "size": svc.page_size,
    }


@check_router.get("/checks/{check_id}")
def get_check(check_id: str, request: Request) -> dict[str, Any]:
    """Get a single check."""
    svc = _get_service(request)
    try:
        check = svc.read(check_id)
    except InvalidIDError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except CheckNotFoundError:
        raise HTTPException(status_code=404, detail="Check not found")
    return check.to_dict()


@check_router.delete("/checks/{check_id}")
def delete_check(check_id: str, request: Request) -> dict[str, str]:
    """Unregister a check."""
    svc = _get_service(request)
    try:
        svc.delete(check_id)
    except InvalidIDError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except CheckNotFoundError:
        raise HTTPException(status_code=404, detail="Check not found")
    except StoreError:
        raise _unexpected("delete")
    return {"status": "deleted"}
