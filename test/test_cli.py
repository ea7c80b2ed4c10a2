import json
import pytest
from src import cli


@pytest.fixture(autouse=True)
def no_catalog_env(monkeypatch):
    monkeypatch.delenv("EMOJI_CATALOG_PATH", raising=False)


def run(capsys, *argv):
    code = cli.main(list(argv))
    return code, capsys.readouterr()


def test_search_prints_json(capsys):
    code, out = run(capsys, "search", "--include", "fruit")
    assert code == 0
    assert [item["glyph"] for item in json.loads(out.out)] == ["🍎", "🍌", "🍇", "🍓", "🍊"]


def test_search_with_excludes_and_distinct(capsys):
    code, out = run(capsys, "search", "-i", "red", "-i", "apple", "-x", "heart", "--distinct")
    assert code == 0
    assert [item["label"] for item in json.loads(out.out)] == ["red apple", "strawberry"]


def test_list_prints_catalog(capsys):
    code, out = run(capsys, "list")
    assert code == 0
    assert json.loads(out.out)[0]["label"] == "grinning face"


def test_custom_catalog_file(capsys, tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"glyph": "🌵", "label": "cactus", "tags": ["plant"]}]), encoding="utf-8")
    code, out = run(capsys, "--catalog", str(path), "search", "-i", "plant")
    assert code == 0
    assert json.loads(out.out) == [{"glyph": "🌵", "label": "cactus", "tags": ["plant"]}]


def test_bad_catalog_exits_with_error(capsys, tmp_path):
    code, out = run(capsys, "--catalog", str(tmp_path / "missing.json"), "list")
    assert code == 1
    assert "Error" in out.err


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2
