# テスト用設定: インメモリSQLite（全接続で1つのDBを共有）
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["INSTANCE_CONNECTION_NAME"] = ""
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from app.db.database import Base, SessionLocal, engine
from app.db.models import Comment
from app.main import app
from app.repositories.comment_repository import CommentRepository
from app.repositories.user_repository import UserRepository


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    return TestClient(app)


@pytest.fixture()
def admin(db):
    return UserRepository(db).create("admin", "admin@example.com", admin=True)


@pytest.fixture()
def member(db):
    return UserRepository(db).create("member", "member@example.com", admin=False)


@pytest.fixture()
def make_comment(db):
    """コメントを直接DBに作成するファクトリ"""

    def _make(user_id, content="A comment", created_at: datetime = None):
        comment = Comment(user_id=user_id, content=content)
        if created_at is not None:
            comment.created_at = created_at
        return CommentRepository(db).save(comment)

    return _make

