"""
Authentication router for sign up, sign in and logout.

Failures never reach the client: every rejected attempt redirects
back to the sign in page and is only logged server-side.
"""
import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse

from app.core.exceptions import (
    AuthenticationError,
    ConflictError,
    PersistenceError,
    ValidationError,
)
from app.dependencies.session import (
    clear_session_cookie,
    get_auth_service,
    get_session_id,
    set_session_cookie,
)
from app.schemas.auth import SignInForm, SignUpForm
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/signup", summary="Create an account and sign in")
async def signup(
    form: Annotated[SignUpForm, Form()],
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new account.
    
    - **name**: Optional display name
    - **email**: Must not already be registered
    - **password**: Required
    """
    try:
        session_id = await auth_service.sign_up(form)
    except ValidationError:
        logger.info("Signup validation failed")
        return _redirect("/signin")
    except ConflictError:
        logger.info("User already exists")
        return _redirect("/signin")
    except PersistenceError:
        logger.exception("Signup error")
        return _redirect("/signin")
    
    response = _redirect("/home")
    set_session_cookie(response, session_id)
    return response


@router.post("/signin", summary="Sign in")
async def signin(
    form: Annotated[SignInForm, Form()],
    auth_service: AuthService = Depends(get_auth_service),
):
    """Authenticate with email and password."""
    try:
        session_id = await auth_service.sign_in(form)
    except AuthenticationError as e:
        logger.info("Signin rejected: %s", e)
        return _redirect("/signin")
    except PersistenceError:
        logger.exception("Signin error")
        return _redirect("/signin")
    
    response = _redirect("/home")
    set_session_cookie(response, session_id)
    return response


@router.post("/logout", summary="Sign out")
async def logout(
    session_id: Annotated[Optional[str], Depends(get_session_id)],
    auth_service: AuthService = Depends(get_auth_service),
):
    """Destroy the session and clear the cookie."""
    try:
        await auth_service.sign_out(session_id)
    except PersistenceError:
        logger.exception("Logout could not reach the session store")
    
    response = _redirect("/home")
    clear_session_cookie(response)
    return response
