from fastapi import Depends, HTTPException, Request, status

from jobly.services.auth import decode_access_token


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def get_optional_current_user(request: Request) -> dict | None:
    """Get the token claims if the request is authenticated, None otherwise.

    Returns {"username": ..., "isAdmin": ...}.
    """
    token = _bearer_token(request)
    if not token:
        return None

    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        return None

    return {"username": payload["sub"], "isAdmin": bool(payload.get("isAdmin", False))}


def get_current_user(request: Request) -> dict:
    """Get the current authenticated user. Raises 401 if not authenticated.

    Use this as a dependency for protected routes.
    """
    token = _bearer_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    user = get_optional_current_user(request)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return user


def require_admin(user: dict = Depends(get_current_user)) -> dict:
    """Allow only admins."""
    if not user["isAdmin"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


def require_admin_or_self(username: str, user: dict = Depends(get_current_user)) -> dict:
    """Allow admins, or the user named by the {username} path parameter."""
    if not user["isAdmin"] and user["username"] != username:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to access this user",
        )
    return user
