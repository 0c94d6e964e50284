# comment-board/app/utils/time_utils.py
"""
タイムスタンプ関連のユーティリティ関数
"""

from datetime import datetime
from pytz import timezone as tz

from app.core.config import settings

APP_TZ = tz(settings.TIMEZONE)
UTC = tz("UTC")


def get_now() -> datetime:
    """現在時刻（UTC）を取得。保存はUTC、表示時にAPP_TZへ変換"""
    return datetime.now(UTC)


def to_app_tz(dt: datetime) -> datetime:
    """日時をアプリのタイムゾーンに変換（naiveはUTCとみなす）"""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = UTC.localize(dt)
    return dt.astimezone(APP_TZ)


def format_timestamp(dt: datetime) -> str:
    """画面表示用の文字列に変換"""
    if dt is None:
        return ""
    return to_app_tz(dt).strftime("%Y-%m-%d %H:%M")
