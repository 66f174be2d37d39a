from fastapi import Header, HTTPException


def get_owner_id(x_user_id: str | None = Header(None)) -> str:
    """Caller identity as forwarded by the identity provider."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not authenticated")
    return x_user_id.strip()
