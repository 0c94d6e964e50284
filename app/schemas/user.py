from pydantic import BaseModel, EmailStr, ConfigDict
from typing import Optional
from datetime import datetime


class UserBase(BaseModel):
    """
    APIでユーザー情報を返すときの基本スキーマ
    """

    id: int  # データベースのユーザーID
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    admin: bool = False
    created_at: Optional[datetime] = None

    # SQLAlchemyモデル（models.User）から
    # Pydanticモデル（UserBase）への自動変換を有効にする
    model_config = ConfigDict(from_attributes=True)
