# comment-board/app/core/flash.py
"""
フラッシュメッセージ（1回だけ表示される通知）

- flash(): リダイレクト前にセッションへ積む
- pop_flashes(): 次の描画時に取り出して消す（1回読んだら失効）
セッションはクライアントごとの署名付きCookie（SessionMiddleware）。
"""

from typing import List, NamedTuple

from fastapi import Request

FLASH_SESSION_KEY = "_flashes"


class FlashMessage(NamedTuple):
    category: str
    message: str


def flash(request: Request, message: str, category: str = "notice") -> None:
    """次の描画で表示するメッセージを登録"""
    pending = list(request.session.get(FLASH_SESSION_KEY, []))
    pending.append([category, message])
    request.session[FLASH_SESSION_KEY] = pending


def pop_flashes(request: Request) -> List[FlashMessage]:
    """保留中のメッセージを全て取り出し、セッションから削除"""
    pending = request.session.pop(FLASH_SESSION_KEY, [])
    return [FlashMessage(category, message) for category, message in pending]
