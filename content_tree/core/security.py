"""Request identity and role checks"""

from enum import Enum
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from content_tree.core.config import settings
from content_tree.core.errors import Forbidden, Unauthenticated

# Anonymous requests are allowed through; routes decide what they need
bearer_scheme = HTTPBearer(auto_error=False)


class UserRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    USER = "user"


class Principal(BaseModel):
    """Authenticated caller"""

    user_id: str
    role: UserRole = UserRole.USER

    @property
    def can_edit(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.EDITOR)


def create_access_token(user_id: str, role: UserRole) -> str:
    """Issue a token carrying the caller's id and role"""
    payload = {"sub": user_id, "role": UserRole(role).value}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Principal:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except jwt.InvalidTokenError:
        raise Unauthenticated("Invalid authentication token")

    user_id = payload.get("sub")
    if not user_id:
        raise Unauthenticated("Invalid authentication token")

    try:
        role = UserRole(payload.get("role", UserRole.USER.value))
    except ValueError:
        raise Unauthenticated("Unknown role in authentication token")

    return Principal(user_id=user_id, role=role)


async def get_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Principal]:
    """Resolve the caller; None means anonymous"""
    if credentials is None:
        return None
    return decode_access_token(credentials.credentials)


def require_authenticated(principal: Optional[Principal]) -> Principal:
    if principal is None:
        raise Unauthenticated("You are not logged in")
    return principal


def require_editor(principal: Optional[Principal]) -> Principal:
    """Only ADMIN and EDITOR may change the category tree"""
    principal = require_authenticated(principal)
    if not principal.can_edit:
        raise Forbidden("You don't have permission to perform this command")
    return principal
