"""パターンサンプルの操作を OpenTelemetry でトレースする計装モジュール。

ビルダーの最終化やシングルトンの取得といった「パターン操作」を 1 スパンとして
記録する。``init_tracer`` を呼ぶまではグローバルの TracerProvider
（既定では no-op）が使われるため、計装済みのコードは初期化なしでも動作する。

デコレータ:
    trace_pattern_operation: パターン操作のトレース
"""

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)
from opentelemetry.trace import StatusCode

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 型変数（ParamSpec + TypeVar で mypy strict / Pylance 互換）
# ---------------------------------------------------------------------------

P = ParamSpec("P")
R = TypeVar("R")

SERVICE_NAME = "patterns"
_TRACER_NAME = "patterns.observability"

# init_tracer で設定されたプロバイダ。未設定ならグローバルを使う。
_provider: TracerProvider | None = None


# ---------------------------------------------------------------------------
# TracerProvider 初期化
# ---------------------------------------------------------------------------


def init_tracer(
    service_name: str = SERVICE_NAME,
    *,
    enable_console_export: bool = False,
    exporter: SpanExporter | None = None,
    set_global: bool = True,
) -> TracerProvider:
    """TracerProvider を初期化し、本モジュールのプロバイダとして登録する。

    ``set_global=True`` の場合はグローバルの TracerProvider にも登録する（OTel の仕様上、
    グローバルは一度しか設定できないため 2 回目以降は警告のみ）。

    Args:
        service_name: サービス名（リソース属性に設定）。
        enable_console_export: True の場合、コンソールへもスパンを出力する。
        exporter: 追加のエクスポータ。同期的に（SimpleSpanProcessor 経由で）送出する。
        set_global: False の場合、本モジュールのプロバイダのみを差し替える。

    Returns:
        生成した TracerProvider。
    """
    global _provider

    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    if enable_console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    if exporter is not None:
        provider.add_span_processor(SimpleSpanProcessor(exporter))

    _provider = provider
    if set_global:
        trace.set_tracer_provider(provider)
    logger.info("TracerProvider 初期化完了: service=%s", service_name)
    return provider


def get_tracer() -> trace.Tracer:
    """トレーサーのインスタンスを取得する。

    ``init_tracer`` 済みならそのプロバイダから、未初期化ならグローバルから取得する。
    """
    if _provider is not None:
        return _provider.get_tracer(_TRACER_NAME)
    return trace.get_tracer(_TRACER_NAME)


# ---------------------------------------------------------------------------
# デコレータ: パターン操作
# ---------------------------------------------------------------------------


def trace_pattern_operation(
    pattern: str,
    operation: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """パターン操作をトレースするデコレータ。

    スパン名は ``<pattern>.<operation>``。
    例外発生時は ``pattern.status=error`` を記録し、例外を再送出する。
    トレーサーは呼び出しごとに解決するため、デコレート後に
    ``init_tracer`` を呼んでも反映される。

    記録する属性:
        - pattern.name: パターン名（"builder" など）
        - pattern.operation: 操作名
        - pattern.status: 実行結果（"success" / "error"）

    Args:
        pattern: パターン名。
        operation: 操作名。省略時は関数名を使用する。

    Returns:
        デコレートされた関数。

    使用方法::

        @trace_pattern_operation("builder", "build")
        def build(self) -> Product:
            ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        op = operation or func.__name__
        span_name = f"{pattern}.{op}"

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with get_tracer().start_as_current_span(
                span_name,
                attributes={
                    "pattern.name": pattern,
                    "pattern.operation": op,
                },
                record_exception=False,
                set_status_on_exception=False,
            ) as span:
                try:
                    result = func(*args, **kwargs)
                    span.set_attribute("pattern.status", "success")
                    return result
                except Exception as exc:
                    span.set_attribute("pattern.status", "error")
                    span.set_status(StatusCode.ERROR, str(exc))
                    span.record_exception(exc)
                    raise

        return wrapper

    return decorator
