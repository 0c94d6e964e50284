from typing import Dict, List

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    String,
    DateTime,
    Text,
)
from sqlalchemy.orm import relationship
from app.db.database import Base
from app.utils.time_utils import get_now


# --- 1. User Model ---
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255))
    email = Column(String(255))

    # 管理者フラグ: 一覧に表示されるのは管理者のコメントのみ
    admin = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), default=get_now)

    # リレーション
    comments = relationship(
        "Comment",
        primaryjoin="User.id == foreign(Comment.user_id)",
        back_populates="user",
    )


# --- 2. Comment Model (コメント) ---
class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text)

    # users.id への論理参照（DBの外部キー制約は付けない）
    # 存在しないユーザーIDでも保存できる
    user_id = Column(Integer, index=True)

    created_at = Column(DateTime(timezone=True), default=get_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=get_now, onupdate=get_now)

    # リレーション
    user = relationship(
        "User",
        primaryjoin="foreign(Comment.user_id) == User.id",
        back_populates="comments",
    )

    def validate(self) -> Dict[str, List[str]]:
        """保存前のバリデーション。エラーがなければ空の辞書を返す"""
        errors: Dict[str, List[str]] = {}
        if self.content is None or not str(self.content).strip():
            errors.setdefault("content", []).append("Content can't be blank")
        if self.user_id is None:
            errors.setdefault("user_id", []).append("User can't be blank")
        return errors
