"""Bearer-token verification. Sign-in itself lives with the external identity provider."""
from __future__ import annotations
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from wordquiz.core import config

_bearer = HTTPBearer(auto_error=False)


def _decode_token(token: str) -> dict:
    try:
        return jwt.decode(
            token,
            config.AUTH_JWT_SECRET,
            algorithms=[config.AUTH_JWT_ALGORITHM],
            audience=config.AUTH_JWT_AUDIENCE,
            options={"verify_aud": config.AUTH_JWT_AUDIENCE is not None},
        )
    except JWTError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}")


# ------------------------------------------------------------------
# Dependency: learner id from the Bearer token's "sub" claim
# ------------------------------------------------------------------
def get_current_learner(credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer)) -> str:
    if not credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    claims = _decode_token(credentials.credentials)
    learner_id = claims.get("sub")
    if not learner_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token has no subject")
    return str(learner_id)
