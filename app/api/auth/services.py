import logging
import requests
from fastapi import HTTPException, Request
from urllib.parse import urlencode
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.config import settings
from app.db.models.user import User
from . import schemas

AUTHORIZATION_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"

SCOPE = "openid email profile"

CALLBACK_PATH = "/auth/callback"
AUTH_ERROR_PATH = "/auth/auth-code-error"

REQUEST_TIMEOUT_SECONDS = 10


def build_callback_url(request: Request) -> str:
    """Current origin (or the configured public origin) plus the fixed callback path."""
    origin = settings.PUBLIC_ORIGIN or str(request.base_url)
    return f"{origin.rstrip('/')}{CALLBACK_PATH}"


def get_authorization_url(redirect_uri: str) -> str:
    params = {
        "client_id": settings.GOOGLE_CLIENT_ID,
        "response_type": "code",
        "redirect_uri": redirect_uri,
        "scope": SCOPE,
        "access_type": "online",
        "prompt": "select_account",
    }
    return f"{AUTHORIZATION_URL}?{urlencode(params)}"


def exchange_code_for_token(code: str, redirect_uri: str) -> dict:
    data = {
        "client_id": settings.GOOGLE_CLIENT_ID,
        "client_secret": settings.GOOGLE_CLIENT_SECRET,
        "code": code,
        "redirect_uri": redirect_uri,
        "grant_type": "authorization_code",
    }

    try:
        response = requests.post(TOKEN_URL, data=data, timeout=REQUEST_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        logging.error("Token exchange request failed: %s", e)
        raise HTTPException(status_code=502, detail="Identity provider unreachable")

    if response.status_code != 200:
        raise HTTPException(status_code=400, detail=f"Token exchange failed: {response.text}")

    return response.json()


def get_user_info(access_token: str) -> schemas.GoogleUserInfo:
    headers = {
        "Authorization": f"Bearer {access_token}",
        "Accept": "application/json",
    }

    try:
        response = requests.get(USERINFO_URL, headers=headers, timeout=REQUEST_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        logging.error("Userinfo request failed: %s", e)
        raise HTTPException(status_code=502, detail="Identity provider unreachable")

    if response.status_code != 200:
        raise HTTPException(status_code=400, detail=f"Failed to fetch user info: {response.text}")

    try:
        return schemas.GoogleUserInfo.model_validate(response.json())
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Unusable user info: {e}")


def upsert_user(db: Session, info: schemas.GoogleUserInfo) -> User:
    user = db.query(User).filter_by(email=info.email).first()
    if not user:
        user = User(
            email=info.email,
            name=info.name,
            avatar_url=info.picture,
            auth_provider="google",
            provider_user_id=info.sub,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logging.info("Created user %s on first sign-in", user.email)
    return user
