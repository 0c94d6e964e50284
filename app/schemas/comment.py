import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.errors import ParameterMissing, UnpermittedParameters
from app.db.database import INTEGER_MAX, INTEGER_MIN

# フォームのキー形式: comment[content], comment[user_id]
PARAM_KEY = "comment"
_NESTED_KEY = re.compile(r"^comment\[(\w+)\]$")


class CommentParams(BaseModel):
    """
    コメント作成・更新で受け付けるフィールド（許可リスト）

    content と user_id 以外のキーはバリデーションエラーになる。
    値の必須チェックはモデル側（Comment.validate）で行う。
    """

    content: Optional[str] = None
    user_id: Optional[int] = Field(default=None, ge=INTEGER_MIN, le=INTEGER_MAX)

    model_config = ConfigDict(extra="forbid")

    @field_validator("user_id", mode="before")
    @classmethod
    def blank_user_id_to_none(cls, v):
        # フォームの空欄は未入力として扱う
        if isinstance(v, str) and not v.strip():
            return None
        return v


def collect_comment_fields(data: Mapping[str, Any]) -> dict:
    """
    リクエストデータから comment のフィールドだけを取り出す

    - フォーム: comment[xxx] 形式のキー
    - JSON: {"comment": {...}}
    """
    nested = data.get(PARAM_KEY)
    if isinstance(nested, Mapping):
        return dict(nested)

    fields = {}
    for key, value in data.items():
        match = _NESTED_KEY.match(key)
        if match:
            fields[match.group(1)] = value
    return fields


def bind_comment_params(data: Mapping[str, Any]) -> CommentParams:
    """リクエストデータを CommentParams に変換（許可リスト外は拒否）"""
    fields = collect_comment_fields(data)
    if not fields:
        raise ParameterMissing(PARAM_KEY)

    try:
        return CommentParams.model_validate(fields)
    except ValidationError as e:
        unpermitted = [
            str(err["loc"][0]) for err in e.errors() if err["type"] == "extra_forbidden"
        ]
        if unpermitted:
            raise UnpermittedParameters(unpermitted)
        invalid = [str(err["loc"][0]) for err in e.errors()]
        raise UnpermittedParameters(invalid, reason="invalid parameters")

