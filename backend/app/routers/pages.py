"""
Static pages and form pages.
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from app.dependencies.session import CurrentUser
from app.views import render_page

router = APIRouter(tags=["Pages"])


@router.get("/", include_in_schema=False)
async def root():
    """Send visitors to the home page."""
    return RedirectResponse("/home", status_code=status.HTTP_302_FOUND)


@router.get("/home", summary="Home page")
async def home(request: Request, current_user: CurrentUser):
    return render_page(request, "home", "Home", current_user)


@router.get("/about", summary="About page")
async def about(request: Request, current_user: CurrentUser):
    return render_page(request, "about", "About", current_user)


@router.get("/archive", summary="Archive page")
async def archive(request: Request, current_user: CurrentUser):
    return render_page(request, "archive", "Archive", current_user)


@router.get("/write", summary="Article submission form")
async def write_form(request: Request, current_user: CurrentUser):
    return render_page(request, "write", "Write", current_user)


@router.get("/signin", summary="Combined sign in / sign up page")
async def signin_page(request: Request, current_user: CurrentUser):
    return render_page(request, "signin", "Sign In / Sign Up", current_user)


@router.get("/signup", include_in_schema=False)
async def signup_page():
    """Sign up lives on the sign in page."""
    return RedirectResponse("/signin", status_code=status.HTTP_302_FOUND)
