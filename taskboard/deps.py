# taskboard/deps.py
from typing import Optional

from fastapi import Request, status
from fastapi.responses import RedirectResponse

from taskboard.flash import flash

LOGIN_URL = "/auth/login"
SESSION_USER_KEY = "user"


def current_user(request: Request) -> Optional[str]:
    user = request.session.get(SESSION_USER_KEY)
    return user if isinstance(user, str) and user else None


def is_authenticated(request: Request) -> bool:
    return current_user(request) is not None


def ensure_authenticated(request: Request) -> Optional[RedirectResponse]:
    """
    Guard for routes that change tasks.

    Returns None when the session is logged in. Otherwise flashes an error
    and returns the redirect to the login page; the caller must return it
    as-is and do nothing else.
    """
    if is_authenticated(request):
        return None
    flash(request, "error", "Please log in to manage tasks")
    return RedirectResponse(LOGIN_URL, status_code=status.HTTP_303_SEE_OTHER)
