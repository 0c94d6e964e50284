# comment-board/app/main.py

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

# 必要なモジュール
from app.db import models  # noqa: F401  テーブル定義を Base に登録する
from app.db.database import engine, Base, close_connector
from app.api.api import api_router
from app.core.config import settings
from app.core.logger import get_logger

logger = get_logger("app")

app = FastAPI(title=settings.APP_TITLE, version="1.0.0")


@app.on_event("startup")
def startup_event():
    try:
        # テーブル作成 (存在しない場合のみ作成される)
        Base.metadata.create_all(bind=engine)
        logger.info("Tables check passed.")
    except Exception as e:
        # DB接続が失敗しても、アプリ自体は起動させておく（ヘルスチェックをパスするため）
        logger.error(f"Startup error: {e!r}")


@app.on_event("shutdown")
def shutdown_event():
    # Cloud SQL Connector のバックグラウンドスレッドを止める
    close_connector()


# --- セッション（フラッシュメッセージ用） ---
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
)

# --- ルーター ---
app.include_router(api_router)


# --- 簡易エンドポイント ---
@app.get("/ping")
def ping():
    return {"status": "success"}


@app.get("/")
def read_root(request: Request):
    return RedirectResponse(
        url=str(request.url_for("list_comments")),
        status_code=status.HTTP_303_SEE_OTHER,
    )
