from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.config import settings
from app.db.session import get_db
from app.db.models.user import User

ACCESS_TOKEN_COOKIE = "access_token"

# Used to extract token from Authorization header; the session cookie is the fallback
bearer_scheme = HTTPBearer(auto_error=False)

# 🔐 Create JWT Access Token
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(ACCESS_TOKEN_COOKIE)


# 👤 Resolve the signed-in identity, or None when there isn't one
def resolve_identity(token: Optional[str], db: Session) -> Optional[User]:
    if not token:
        return None

    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logging.warning("JWT decode failed: %s", str(e))
        return None

    user_email: Optional[str] = payload.get("sub")
    if user_email is None:
        logging.warning("JWT token missing 'sub' claim")
        return None

    user = db.query(User).filter(User.email == user_email).first()
    if user is None:
        logging.warning("User not found in DB for email: %s", user_email)
    return user


def get_optional_user(token: Optional[str] = Depends(get_token), db: Session = Depends(get_db)) -> Optional[User]:
    return resolve_identity(token, db)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
