"""環境変数からサンプル実行時の設定を読み込む。

設定するのはログとトレースのみで、``Product`` の内容には関与しない。

環境変数:
    PATTERNS_LOG_LEVEL: ログレベル（既定 ``INFO``）
    PATTERNS_TRACE_CONSOLE: スパンをコンソールへ出力するか（既定 ``false``）
    PATTERNS_SERVICE_NAME: トレースのサービス名（既定 ``patterns``）
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from observability.tracing import SERVICE_NAME


def normalize_log_level(raw: str) -> str:
    """ログレベル名を大文字に正規化する。

    Raises:
        ValueError: ``logging`` が知らないレベル名の場合。
    """
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {raw!r}")
    return level


class Settings(BaseSettings):
    """サンプル実行時の設定。

    ``PATTERNS_`` 接頭辞の環境変数から読み込まれる。真偽値の解釈は pydantic に任せ、
    解釈できない値は検証エラーとなる。

    不変条件 (Invariant):
        - ``log_level`` は ``logging`` が解釈できるレベル名（大文字）
    """

    log_level: str = "INFO"
    trace_console: bool = False
    service_name: str = SERVICE_NAME

    model_config = SettingsConfigDict(env_prefix="PATTERNS_", frozen=True)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return normalize_log_level(value)


def load_settings() -> Settings:
    """環境変数から ``Settings`` を組み立てる。

    Raises:
        pydantic.ValidationError: 環境変数の値が不正な場合。
    """
    return Settings()
