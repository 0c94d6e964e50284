# comment-board/app/core/logger.py
"""
ロギング設定

ターミナル出力のみ。ハンドラーはロガーごとに1回だけ追加する。
"""

import logging

from app.core.config import settings

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"


def get_logger(name: str = "app", level: str | None = None) -> logging.Logger:
    """ロガーを取得（初回のみハンドラーとレベルを設定）"""
    # SQLAlchemyのクエリログは抑制（DEBUG時はengineのechoで出す）
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    logger = logging.getLogger(name)

    # 既にハンドラーが設定されていればそのまま返す
    if logger.handlers:
        return logger

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
