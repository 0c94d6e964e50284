# comment-board/app/repositories/crud_repository.py
"""
汎用CRUDリポジトリ

サブクラスは model_class() で対象モデルを返すだけでよい。
モデルに validate() があれば save() の前に実行し、エラーがあれば RecordInvalid を投げる。
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from sqlalchemy.orm import Session

from app.core.errors import NotFoundException, RecordInvalid
from app.db.database import Base, INTEGER_MAX, INTEGER_MIN

T = TypeVar("T", bound=Base)


class CRUDRepository(Generic[T], ABC):
    def __init__(self, db: Session):
        self.db = db

    @abstractmethod
    def model_class(self) -> type[T]:
        """サブクラスで具体的なモデルクラスを返す"""
        pass

    def find_by_id(self, id: int) -> Optional[T]:
        """IDでレコードを取得（なければNone）"""
        # DBの整数範囲外のIDは存在しない扱い
        if not INTEGER_MIN <= id <= INTEGER_MAX:
            return None
        return self.db.get(self.model_class(), id)

    def find(self, id: int) -> T:
        """IDでレコードを取得（なければ404）"""
        instance = self.find_by_id(id)
        if instance is None:
            raise NotFoundException(self.model_class().__name__, id)
        return instance

    def all(self) -> List[T]:
        return self.db.query(self.model_class()).order_by(self.model_class().id).all()

    def save(self, instance: T) -> T:
        """
        バリデーション後に保存（新規・更新どちらも）

        バリデーションエラー時は何も書き込まずに RecordInvalid を投げる。
        """
        validate = getattr(instance, "validate", None)
        if validate is not None:
            errors = validate()
            if errors:
                raise RecordInvalid(errors)

        try:
            self.db.add(instance)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(instance)
        return instance

    def delete(self, instance: T) -> None:
        """レコードを即時削除（論理削除なし）"""
        try:
            self.db.delete(instance)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
