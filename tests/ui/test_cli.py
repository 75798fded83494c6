from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from showzup.adapters.manifest_file import dump_manifest
from showzup.config import RESOLUTION_LOGGER
from showzup.domain import ManifestBuilder
from showzup.ui import cli
from tests.support.showzup_types import DogPageView, DogPopupView, DogVM, Form

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

_FORM = "tests.support.showzup_types:Form"


@pytest.fixture(autouse=True)
def restore_resolution_logger() -> Iterator[None]:
    resolution_logger = logging.getLogger(RESOLUTION_LOGGER)
    level = resolution_logger.level
    yield
    resolution_logger.setLevel(level)


@pytest.fixture
def manifest_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.delenv("SHOWZUP_MANIFEST", raising=False)
    monkeypatch.delenv("SHOWZUP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SHOWZUP_TRACE_RESOLUTION", raising=False)
    manifest = (
        ManifestBuilder()
        .map_view_model(DogVM, DogPageView, variants=[Form.PAGE])
        .map_view_model(DogVM, DogPopupView, variants=[Form.POPUP])
        .map_prefab(DogPageView, "prefabs/dog-page")
        .map_prefab(DogPopupView, "prefabs/dog-popup")
        .build()
    )
    path = tmp_path / "manifest.json"
    dump_manifest(manifest, path)
    return path


def test_check_reports_valid_manifest(manifest_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        cli.main(["check", "--manifest", str(manifest_path), "--groups", _FORM])

    assert "is valid" in caplog.text


def test_check_reads_manifest_path_from_environment(
    manifest_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("SHOWZUP_MANIFEST", str(manifest_path))

    with caplog.at_level(logging.INFO):
        cli.main(["check", "--groups", _FORM])

    assert str(manifest_path) in caplog.text


def test_resolve_logs_view_info(manifest_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        cli.main(
            [
                "resolve",
                "tests.support.showzup_types:DogVM",
                "--manifest",
                str(manifest_path),
                "--variant",
                "Form.POPUP",
                "--groups",
                _FORM,
            ]
        )

    assert "prefab_uri=prefabs/dog-popup" in caplog.text


def test_missing_manifest_configuration_exits_with_usage_error(manifest_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check", "--groups", _FORM])

    assert excinfo.value.code == 2


def test_unknown_variant_exits_with_usage_error(manifest_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            [
                "resolve",
                "tests.support.showzup_types:DogVM",
                "--manifest",
                str(manifest_path),
                "--variant",
                "Form.SIDEBAR",
                "--groups",
                _FORM,
            ]
        )

    assert excinfo.value.code == 2


def test_invalid_log_level_exits_with_usage_error(
    manifest_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SHOWZUP_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check", "--manifest", str(manifest_path)])

    assert excinfo.value.code == 2


def test_resolution_failure_exits_with_error(manifest_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            [
                "resolve",
                "tests.support.showzup_types:Dog",
                "--manifest",
                str(manifest_path),
                "--groups",
                _FORM,
            ]
        )

    assert excinfo.value.code == 1


def test_missing_manifest_file_exits_with_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check", "--manifest", str(tmp_path / "missing.json"), "--groups", _FORM])

    assert excinfo.value.code == 1


def test_missing_manifest_configuration_names_flag_and_variable(
    manifest_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with pytest.raises(SystemExit):
        cli.main(["check", "--groups", _FORM])

    assert "--manifest PATH or set SHOWZUP_MANIFEST" in caplog.text


def test_mistyped_group_exits_with_usage_error_naming_the_group(
    manifest_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check", "--manifest", str(manifest_path), "--groups", "tests.support.showzup_types:Fomr"])

    assert excinfo.value.code == 2
    assert "Cannot import variant group 'tests.support.showzup_types:Fomr' given to --groups" in caplog.text


def test_trace_resolution_logs_candidate_scoring(
    manifest_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("SHOWZUP_TRACE_RESOLUTION", "1")

    cli.main(
        ["resolve", "tests.support.showzup_types:DogVM", "--manifest", str(manifest_path), "--groups", _FORM]
    )

    assert "Other candidates were" in caplog.text
