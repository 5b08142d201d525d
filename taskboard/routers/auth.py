# taskboard/routers/auth.py
import hashlib
import hmac
import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from taskboard.config import settings
from taskboard.deps import LOGIN_URL, SESSION_USER_KEY, is_authenticated
from taskboard.flash import flash
from taskboard.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


# ----------------- Helpers -----------------


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return hmac.compare_digest(hash_password(plain_password).encode("utf-8"), hashed_password.encode("utf-8"))


def check_credentials(username: str, password: str) -> bool:
    expected_user = settings.TASKBOARD_USERNAME
    if not expected_user or not hmac.compare_digest(username.encode("utf-8"), expected_user.encode("utf-8")):
        return False
    return verify_password(password, settings.TASKBOARD_PASSWORD_HASH)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


# ----------------- Routes -----------------


@router.get("/login")
def login_form(request: Request):
    if is_authenticated(request):
        return _redirect("/tasks")
    return render(request, "auth/login.html", {"title": "Log in"})


@router.post("/login")
async def login(request: Request):
    form = await request.form()
    username = str(form.get("username") or "").strip()
    password = str(form.get("password") or "")

    if not check_credentials(username, password):
        logger.warning("Failed login for username=%r", username)
        flash(request, "error", "Invalid username or password")
        return _redirect(LOGIN_URL)

    request.session[SESSION_USER_KEY] = username
    logger.info("User %r logged in", username)
    flash(request, "success", "You are now logged in")
    return _redirect("/tasks")


@router.post("/logout")
def logout(request: Request):
    request.session.pop(SESSION_USER_KEY, None)
    flash(request, "success", "You are logged out")
    return _redirect(LOGIN_URL)
