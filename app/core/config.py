# comment-board/app/core/config.py

import os
from dotenv import load_dotenv

# .envファイルを読み込む（ローカル開発用）
# 本番環境（Cloud Runなど）ではファイルがないため無視されます
load_dotenv()


class Settings:
    # アプリ設定
    APP_TITLE: str = "Comment Board"

    # DB設定
    # ローカルではSQLite、本番ではDATABASE_URLで上書き
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./comments.db")

    # Cloud SQL接続名（設定されている場合はConnector経由で接続）
    INSTANCE_CONNECTION_NAME: str = os.getenv("INSTANCE_CONNECTION_NAME", "")
    DB_USER: str = os.getenv("DB_USER", "postgres")
    # .envではDB_PASSとなっているため、ここで名前を合わせて読み込みます
    DB_PASSWORD: str = os.getenv("DB_PASS", "password")
    DB_NAME: str = os.getenv("DB_NAME", "comments")

    # セッション（フラッシュメッセージ用の署名付きCookie）
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
    SESSION_COOKIE: str = os.getenv("SESSION_COOKIE", "comments_session")

    # ログ設定
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # タイムスタンプのタイムゾーン
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

    # DEBUG mode（SQLをechoする）
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# 設定インスタンスを作成してエクスポート
settings = Settings()
