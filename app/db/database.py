import threading
from typing import Optional

import sqlalchemy
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from app.core.config import settings

# 整数カラム（BIGINT相当）の範囲。範囲外のIDはDBに渡さない
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1

# Cloud SQL Connector（プロセスで1つだけ。初回接続時に作成）
_connector = None
_connector_lock = threading.Lock()


def get_connector():
    """Cloud SQL Connector を取得（なければ作成）"""
    global _connector
    with _connector_lock:
        if _connector is None:
            from google.cloud.sql.connector import Connector

            _connector = Connector()
        return _connector


def close_connector() -> None:
    """Connector を閉じる（アプリ終了時）"""
    global _connector
    with _connector_lock:
        if _connector is not None:
            _connector.close()
            _connector = None


def getconnection():
    """
    Cloud SQL への接続を確立する関数.
    INSTANCE_CONNECTION_NAME が設定されている場合のみ使用します。
    """
    conn = get_connector().connect(
        settings.INSTANCE_CONNECTION_NAME,
        "pymysql",
        user=settings.DB_USER,
        password=settings.DB_PASSWORD,
        db=settings.DB_NAME,
        charset="utf8mb4",
    )
    return conn


def create_db_engine(url: Optional[str] = None):
    """設定に応じてエンジンを作成する"""
    if settings.INSTANCE_CONNECTION_NAME and url is None:
        return sqlalchemy.create_engine(
            "mysql+pymysql://",
            creator=getconnection,
            echo=settings.DEBUG,
        )

    url = url or settings.DATABASE_URL
    kwargs = {"echo": settings.DEBUG}
    if url.startswith("sqlite"):
        # FastAPIはスレッドプールで同期エンドポイントを実行するため
        kwargs["connect_args"] = {"check_same_thread": False}
        # インメモリDBは接続ごとに別DBになるので1接続を共有
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return sqlalchemy.create_engine(url, **kwargs)


# エンジンの作成
engine = create_db_engine()

# セッション作成
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """
    DBセッションを取得するための依存関係.
    リクエストごとに1セッション。コミットされなかった変更は close 時に破棄される。
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
