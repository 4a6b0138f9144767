"""デモ CLI のテスト。"""

import logging
from collections.abc import Iterator

import pytest

from patterns import cli
from patterns.cli import main
from patterns.config import Settings
from patterns.singleton import Singleton


@pytest.fixture(autouse=True)
def fresh_instances(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(Singleton, "_instances", {})
    yield


@pytest.fixture(autouse=True)
def restore_root_level() -> Iterator[None]:
    """main が変更したルートロガーのレベルを元に戻す。"""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def tracer_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[tuple, dict]]:
    """cli 内の init_tracer 呼び出しを記録する。"""
    calls: list[tuple[tuple, dict]] = []
    monkeypatch.setattr(
        cli, "init_tracer", lambda *args, **kwargs: calls.append((args, kwargs))
    )
    return calls


def test_builder_demo_prints_product(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["builder"], settings=Settings()) == 0

    out = capsys.readouterr().out
    assert "--- Builder demo ---" in out
    assert "'name': 'MyProduct'" in out
    assert "'color': 'red'" in out
    assert "'size': 'L'" in out
    assert "Singleton demo" not in out


def test_builder_demo_uses_given_name(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["builder", "--name", "Widget"], settings=Settings()) == 0
    assert "'name': 'Widget'" in capsys.readouterr().out


def test_singleton_demo_reports_same_instance(
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["singleton"], settings=Settings()) == 0
    assert "same instance: True" in capsys.readouterr().out


def test_all_runs_both_demos(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([], settings=Settings()) == 0

    out = capsys.readouterr().out
    assert "--- Singleton demo ---" in out
    assert "--- Builder demo ---" in out


def test_empty_name_fails_with_exit_code(caplog: pytest.LogCaptureFixture) -> None:
    assert main(["builder", "--name", ""], settings=Settings()) == 1
    assert "product must have a name" in caplog.text


def test_unknown_demo_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["factory"], settings=Settings())
    assert excinfo.value.code == 2


def test_invalid_log_level_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "chatty"], settings=Settings())
    assert excinfo.value.code == 2


def test_log_level_flag_overrides_settings() -> None:
    settings = Settings(log_level="ERROR")
    assert main(["singleton", "--log-level", "debug"], settings=settings) == 0
    assert logging.getLogger().level == logging.DEBUG


def test_settings_log_level_used_without_flag() -> None:
    assert main(["singleton"], settings=Settings(log_level="ERROR")) == 0
    assert logging.getLogger().level == logging.ERROR


def test_trace_console_flag_initializes_tracer(
    tracer_calls: list[tuple[tuple, dict]],
) -> None:
    settings = Settings(service_name="demo")
    assert main(["builder", "--trace-console"], settings=settings) == 0
    assert tracer_calls == [(("demo",), {"enable_console_export": True})]


def test_trace_console_setting_initializes_tracer(
    tracer_calls: list[tuple[tuple, dict]],
) -> None:
    assert main(["builder"], settings=Settings(trace_console=True)) == 0
    assert tracer_calls == [(("patterns",), {"enable_console_export": True})]


def test_tracer_not_initialized_by_default(
    tracer_calls: list[tuple[tuple, dict]],
) -> None:
    assert main(["builder"], settings=Settings(trace_console=False)) == 0
    assert tracer_calls == []
