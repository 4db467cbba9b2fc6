from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.database import get_db
from app.core.security import decode_access_token, TokenExpired, TokenInvalid
from app.models.user import User, UserRole, UserStatus

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
        db: AsyncSession = Depends(get_db)
) -> User:
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Access token required")

    try:
        payload = decode_access_token(credentials.credentials)
    except TokenExpired:
        raise _unauthorized("Token expired")
    except TokenInvalid:
        raise _unauthorized("Invalid token")

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise _unauthorized("Invalid token")

    result = await db.execute(
        select(User).where(
            User.id == int(user_id),
            User.status == UserStatus.ACTIVE.value
        )
    )
    user = result.scalar_one_or_none()

    if user is None:
        raise _unauthorized("Invalid token or user not found")

    return user


def require_roles(*roles: str):
    """Dependency factory allowing only the given user roles."""

    async def checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions"
            )
        return current_user

    return checker


require_admin = require_roles(UserRole.ADMIN.value)
