# comment-board/app/core/errors.py
"""
共通エラー型
"""

from typing import Dict, Iterable, List

from fastapi import HTTPException, status


class NotFoundException(HTTPException):
    """404 - レコードが存在しない"""

    def __init__(self, name: str = "Record", record_id=None):
        detail = f"{name} not found"
        if record_id is not None:
            detail = f"Couldn't find {name} with id={record_id}"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ParameterMissing(HTTPException):
    """400 - 必須パラメータ（例: comment）が無い"""

    def __init__(self, param: str):
        self.param = param
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"param is missing or the value is empty: {param}",
        )


class UnpermittedParameters(HTTPException):
    """422 - 許可リスト外のフィールド、または型が不正"""

    def __init__(self, params: Iterable[str], reason: str = "unpermitted parameters"):
        self.params = sorted(params)
        super().__init__(
            status_code=422,
            detail=f"{reason}: {', '.join(self.params)}",
        )


class RecordInvalid(Exception):
    """バリデーション失敗（保存されていない）"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        messages = [m for msgs in errors.values() for m in msgs]
        super().__init__("Validation failed: " + ", ".join(messages))
