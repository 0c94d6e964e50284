# comment-board/app/repositories/comment_repository.py

from typing import List

from app.db import models
from app.repositories.crud_repository import CRUDRepository


class CommentRepository(CRUDRepository[models.Comment]):
    def model_class(self) -> type[models.Comment]:
        return models.Comment

    def list_admin_comments(self) -> List[models.Comment]:
        """
        管理者ユーザーのコメント一覧を新着順で取得

        - comments.user_id = users.id で結合（ユーザーが存在しないコメントは含まない）
        - users.admin が真のものだけ
        - created_at の降順（同時刻は id の降順）
        """
        return (
            self.db.query(models.Comment)
            .join(models.User, models.Comment.user_id == models.User.id)
            .filter(models.User.admin.is_(True))
            .order_by(models.Comment.created_at.desc(), models.Comment.id.desc())
            .all()
        )
