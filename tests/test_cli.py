"""End-to-end tests for the bookstack console script."""

from pathlib import Path

import pytest

from bookstack.cli import main

CATALOG_TEXT = '''
"9780545310581", "Hunger Games", "Suzanne Collins", 14.99
"0140444300",    "Les Mis",      "Victor Hugo",      9.50
'''


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BOOKSTACK_CATALOG", "BOOKSTACK_TRACE", "BOOKSTACK_TRANSFER_STRATEGY", "BOOKSTACK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def catalog_file(tmp_path: Path) -> str:
    path = tmp_path / "database.txt"
    path.write_text(CATALOG_TEXT, encoding="utf-8")
    return str(path)


def test_checkout_demo_cart(catalog_file: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["checkout", "--catalog", catalog_file]) == 0
    out = capsys.readouterr().out
    assert out.count("not found, no charge") == 3
    assert out.rstrip().endswith("Total: $24.49")


def test_checkout_given_isbns_with_trace(catalog_file: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["checkout", "--catalog", catalog_file, "--trace", "0140444300", "0140444300"]) == 0
    captured = capsys.readouterr()
    assert "Total: $19.00" in captured.out
    assert captured.err.count("moves:") == 3


def test_catalog_from_environment(
    catalog_file: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("BOOKSTACK_CATALOG", catalog_file)
    assert main(["count"]) == 0
    assert capsys.readouterr().out.strip() == "2"


def test_lookup(catalog_file: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["lookup", "--catalog", catalog_file, "0140444300"]) == 0
    assert capsys.readouterr().out.strip() == '"0140444300", "Les Mis", "Victor Hugo", 9.50'

    assert main(["lookup", "--catalog", catalog_file, "000"]) == 1
    assert "not found" in capsys.readouterr().err


def test_missing_catalog(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["count", "--catalog", str(tmp_path / "absent.txt")]) == 1
    assert "Could not load catalog" in capsys.readouterr().err


@pytest.mark.parametrize("strategy", ["recursive", "iterative"])
def test_moves(strategy: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("BOOKSTACK_TRANSFER_STRATEGY", strategy)
    assert main(["moves", "6"]) == 0
    assert capsys.readouterr().out.strip() == "Moved 6 books in 63 moves"


def test_bad_strategy_is_reported(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("BOOKSTACK_TRANSFER_STRATEGY", "teleport")
    assert main(["moves", "1"]) == 1
    assert "teleport" in capsys.readouterr().err


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
