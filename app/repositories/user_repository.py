# comment-board/app/repositories/user_repository.py

from app.db import models
from app.repositories.crud_repository import CRUDRepository


class UserRepository(CRUDRepository[models.User]):
    def model_class(self) -> type[models.User]:
        return models.User

    def create(self, username: str, email: str, admin: bool = False) -> models.User:
        """ユーザーを作成（シード・テスト用）"""
        return self.save(models.User(username=username, email=email, admin=admin))
