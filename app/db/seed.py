# comment-board/app/db/seed.py
"""
デモデータ投入スクリプト
- 管理者ユーザーと一般ユーザー
- それぞれのコメント（一覧に出るのは管理者のコメントのみ）

実行: python -m app.db.seed
"""

from sqlalchemy.orm import Session

from app.core.logger import get_logger
from app.db.database import SessionLocal, engine, Base
from app.db.models import Comment
from app.repositories.comment_repository import CommentRepository
from app.repositories.user_repository import UserRepository

logger = get_logger(__name__)

# --- デモデータ定義 ---
USERS_DATA = [
    {"username": "admin", "email": "admin@example.com", "admin": True},
    {"username": "moderator", "email": "moderator@example.com", "admin": True},
    {"username": "guest", "email": "guest@example.com", "admin": False},
]

COMMENTS_DATA = [
    ("admin", "Welcome to the comment board."),
    ("moderator", "Please keep the discussion friendly."),
    ("guest", "Hello from a regular user."),
]


def seed(db: Session, reset: bool = False) -> None:
    """デモユーザーとコメントを投入する"""
    if reset:
        Base.metadata.drop_all(bind=db.get_bind())
    Base.metadata.create_all(bind=db.get_bind())

    user_repo = UserRepository(db)
    if user_repo.all():
        logger.info("Users already exist. Skipping seed.")
        return

    users = {}
    for data in USERS_DATA:
        users[data["username"]] = user_repo.create(**data)
    logger.info(f"Created {len(users)} users.")

    comment_repo = CommentRepository(db)
    for username, content in COMMENTS_DATA:
        comment_repo.save(Comment(user_id=users[username].id, content=content))
    logger.info(f"Created {len(COMMENTS_DATA)} comments.")


if __name__ == "__main__":
    db = SessionLocal()
    try:
        seed(db, reset=False)
    finally:
        db.close()
    logger.info(f"Seed finished ({engine.url.render_as_string(hide_password=True)})")
