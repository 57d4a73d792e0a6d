from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from conftest import FakeCitiesBackend

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "worldwise_cli.py"


@pytest.fixture(scope="module")
def cli() -> ModuleType:
    spec = importlib.util.spec_from_file_location("worldwise_cli", _SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


async def _invoke(cli: ModuleType, *argv: str) -> int:
    args = cli._build_parser().parse_args(list(argv))
    result: int = await cli._run(args)
    return result


@pytest.mark.asyncio
async def test_cli_list_prints_a_row_per_city(
    cli: ModuleType, base_url: str, backend: FakeCitiesBackend, capsys: pytest.CaptureFixture[str]
) -> None:
    assert await _invoke(cli, "--base-url", base_url, "list") == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert "Lagos" in lines[0]
    assert "(Jun 11, 2027)" in lines[0]
    assert "Paris" in lines[1]
    assert backend.calls == {"GET /cities": 1}


@pytest.mark.asyncio
async def test_cli_list_empty_collection(
    cli: ModuleType, base_url: str, backend: FakeCitiesBackend, capsys: pytest.CaptureFixture[str]
) -> None:
    backend.cities.clear()
    assert await _invoke(cli, "--base-url", base_url, "list") == 0
    assert capsys.readouterr().out.strip() == "Add your first city by clicking on a city on the map"


@pytest.mark.asyncio
async def test_cli_show_skips_initial_load(
    cli: ModuleType, base_url: str, backend: FakeCitiesBackend, capsys: pytest.CaptureFixture[str]
) -> None:
    assert await _invoke(cli, "--base-url", base_url, "show", "2") == 0

    out = capsys.readouterr().out
    assert "You went to Paris on Wednesday, July 14, 2027" in out
    assert backend.calls == {"GET /cities/{city_id}": 1}


@pytest.mark.asyncio
async def test_cli_failure_exits_nonzero(
    cli: ModuleType, base_url: str, backend: FakeCitiesBackend, capsys: pytest.CaptureFixture[str]
) -> None:
    backend.force_status = 500
    assert await _invoke(cli, "--base-url", base_url, "list") == 1

    err = capsys.readouterr().err
    assert "There was an error loading cities..." in err
    assert "network" in err
