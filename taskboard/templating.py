# taskboard/templating.py
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from taskboard.config import settings
from taskboard.deps import current_user
from taskboard.flash import get_flashed, pop_flashes

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_title"] = settings.APP_TITLE
templates.env.globals["get_flashed"] = get_flashed


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """Render a page; pending flash messages are consumed here."""
    ctx = dict(context or {})
    ctx["flashes"] = pop_flashes(request)
    ctx["current_user"] = current_user(request)
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
