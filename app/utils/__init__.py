# comment-board/app/utils/__init__.py
"""
ユーティリティモジュール
"""

from .time_utils import (
    get_now,
    to_app_tz,
    format_timestamp,
    APP_TZ,
)
