import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.db.session import get_db
from app.db.models.user import User
from app.core.security import ACCESS_TOKEN_COOKIE, create_access_token, get_current_user
from . import schemas, services

router = APIRouter()


@router.get("/google/login")
def login_with_google(request: Request):
    redirect_uri = services.build_callback_url(request)
    return RedirectResponse(services.get_authorization_url(redirect_uri), status_code=status.HTTP_302_FOUND)


@router.get("/callback")
def google_callback(
    request: Request,
    code: Optional[str] = None,
    error: Optional[str] = None,
    db: Session = Depends(get_db),
):
    if error or not code:
        logging.warning("OAuth callback without code (error=%s)", error)
        return RedirectResponse(services.AUTH_ERROR_PATH, status_code=status.HTTP_302_FOUND)

    try:
        # Step 1: Exchange code for token
        token_data = services.exchange_code_for_token(code, services.build_callback_url(request))

        # Step 2: Use access token to get user info
        user_info = services.get_user_info(token_data["access_token"])
    except (HTTPException, KeyError) as e:
        logging.error("OAuth callback failed: %s", e)
        return RedirectResponse(services.AUTH_ERROR_PATH, status_code=status.HTTP_302_FOUND)

    # Step 3: Find or create the user
    try:
        user = services.upsert_user(db, user_info)
    except SQLAlchemyError as e:
        db.rollback()
        logging.error("Could not store user %s: %s", user_info.email, e)
        return RedirectResponse(services.AUTH_ERROR_PATH, status_code=status.HTTP_302_FOUND)

    # Step 4: Issue the session token
    jwt_token = create_access_token({"sub": user.email})
    response = RedirectResponse("/dashboard", status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        jwt_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.ENV == "prod",
        samesite="lax",
    )
    return response


@router.get("/auth-code-error")
def auth_code_error():
    return {
        "title": "Authentication Error",
        "detail": "There was an error during the authentication process. Please try signing in again.",
        "sign_in_url": "/",
    }


@router.get("/me", response_model=schemas.UserOut)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.post("/logout")
def logout():
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return response
