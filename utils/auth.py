# utils/auth.py
"""
Bearer-token guard for the write endpoints.

Reads and listings stay public. When AUTH_REQUIRED is enabled, POST/PUT/DELETE
need an HS256 JWT signed with JWT_SECRET.
"""
from typing import Optional

from fastapi import HTTPException, Request
from jose import JWTError, jwt

import config


def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=401, detail="Missing token")
     token = auth.split(" ", 1)[1]
     if not config.JWT_SECRET:
          raise HTTPException(status_code=403, detail="Invalid token")
     try:
          return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
     except JWTError:
          raise HTTPException(status_code=403, detail="Invalid token")


def require_write_access(request: Request) -> Optional[dict]:
     """FastAPI dependency for mutating routes; a no-op unless AUTH_REQUIRED is set."""
     if not config.AUTH_REQUIRED:
          return None
     return verify_token(request)
