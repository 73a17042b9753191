"""Echo the principal resolved for the current request."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from principal_auth.dependencies import get_auth_outcome, get_principal_id

router = APIRouter()


@router.get("/whoami")
async def whoami(
    principal_id: str = Depends(get_principal_id),
    outcome: str = Depends(get_auth_outcome),
) -> dict:
    return {"principal_id": principal_id, "authenticated": outcome == "verified"}
