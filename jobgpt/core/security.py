from __future__ import annotations

from fastapi import Header, HTTPException, status


def require_owner_id(x_user_id: str | None = Header(default=None, alias="X-User-Id")) -> str:
    """Resolve the owner id of the calling user.

    Sign-in happens upstream of this service; the caller forwards the
    authenticated user identifier and every stored record is scoped to it.
    """
    owner_id = (x_user_id or "").strip()
    if not owner_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header.",
        )
    return owner_id
