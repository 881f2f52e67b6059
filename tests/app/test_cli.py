from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from dlcimport.domain.conversion import UnresolvedParentError
from dlcimport.ui import cli


def _fake_outcome(output_path: Path) -> SimpleNamespace:
    result = SimpleNamespace(records_emitted=3, collection_id="PIC/1")
    return SimpleNamespace(result=result, output_path=output_path)


def test_convert_command_passes_options(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    captured: dict[str, object] = {}

    def fake_convert(input_path: Path, **kwargs: object) -> SimpleNamespace:
        captured["input_path"] = input_path
        captured.update(kwargs)
        return _fake_outcome(tmp_path / "out.json")

    monkeypatch.delenv("DLC_REPOSITORY_ID", raising=False)
    monkeypatch.setattr(cli, "convert_dlc_csv", fake_convert)

    cli.main(
        [
            "convert",
            str(tmp_path / "export.csv"),
            "-o",
            str(tmp_path / "out.json"),
            "--repository-id",
            "7",
            "--agents-db",
            "sqlite+pysqlite:///:memory:",
            "--no-agent-registry",
        ]
    )

    assert captured["input_path"] == tmp_path / "export.csv"
    assert captured["output_path"] == tmp_path / "out.json"
    assert captured["config"].repository_id == "7"  # type: ignore[attr-defined]
    assert captured["use_registry"] is False
    assert captured["database_uri"] == "sqlite+pysqlite:///:memory:"


def test_convert_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_convert(input_path: Path, **kwargs: object) -> SimpleNamespace:
        captured.update(kwargs)
        return _fake_outcome(input_path.with_suffix(".json"))

    monkeypatch.delenv("DLC_REPOSITORY_ID", raising=False)
    monkeypatch.setattr(cli, "convert_dlc_csv", fake_convert)

    cli.main(["convert", "export.csv"])

    assert captured["output_path"] is None
    assert captured["use_registry"] is True
    assert captured["database_uri"] is None
    assert captured["config"].repository_id == "12345"  # type: ignore[attr-defined]


def test_invalid_repository_id_exits_with_2(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_convert(*_: object, **__: object) -> None:
        raise AssertionError("conversion must not run")

    monkeypatch.setattr(cli, "convert_dlc_csv", fake_convert)

    with pytest.raises(SystemExit) as exc:
        cli.main(["convert", "export.csv", "--repository-id", "main"])

    assert exc.value.code == 2


def test_conversion_error_exits_with_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_convert(*_: object, **__: object) -> None:
        raise UnresolvedParentError("no collection-header row")

    monkeypatch.delenv("DLC_REPOSITORY_ID", raising=False)
    monkeypatch.setattr(cli, "convert_dlc_csv", fake_convert)

    with pytest.raises(SystemExit) as exc:
        cli.main(["convert", "export.csv"])

    assert exc.value.code == 1


def test_missing_input_file_exits_with_1(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.delenv("DLC_REPOSITORY_ID", raising=False)

    with pytest.raises(SystemExit) as exc:
        cli.main(["convert", str(tmp_path / "missing.csv"), "--no-agent-registry"])

    assert exc.value.code == 1


def test_agents_add_command(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_register(name: str, agent_uri: str, **kwargs: object) -> bool:
        captured.update(name=name, agent_uri=agent_uri, **kwargs)
        return True

    monkeypatch.setattr(cli, "register_agent", fake_register)

    cli.main(["agents", "add", "Doe, Jane", "/agents/people/7", "--replace"])

    assert captured == {
        "name": "Doe, Jane",
        "agent_uri": "/agents/people/7",
        "replace": True,
        "database_uri": None,
    }


def test_missing_command_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([])

    assert exc.value.code == 2
