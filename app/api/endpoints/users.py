# comment-board/app/api/endpoints/users.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.repositories.user_repository import UserRepository
from app.schemas import user as user_schema

router = APIRouter()


@router.get("/", response_model=List[user_schema.UserBase], summary="ユーザー一覧")
def read_users(db: Session = Depends(get_db)):
    """
    全ユーザーを取得します（コメント投稿フォームの user_id 確認用）。
    """
    return UserRepository(db).all()
