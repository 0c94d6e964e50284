# comment-board/app/core/templating.py
"""
Jinja2テンプレートの描画

描画のたびに保留中のフラッシュメッセージを取り出して渡す（表示は1回きり）。
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from app.core.config import settings
from app.core.flash import pop_flashes
from app.utils.time_utils import format_timestamp

BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.filters["timestamp"] = format_timestamp
templates.env.globals["app_title"] = settings.APP_TITLE


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """テンプレートを描画（フラッシュはここで消費される）"""
    ctx = dict(context or {})
    ctx["flashes"] = pop_flashes(request)
    return templates.TemplateResponse(
        request=request,
        name=name,
        context=ctx,
        status_code=status_code,
    )
