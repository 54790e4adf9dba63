import tomllib

import pytest
from conftest import local, parse

from patterncard import cli
from patterncard.file_utils import output_name, svg_to_png
from patterncard.styles import available_styles


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[style]\n"
        '    seedlist = ["alpha", 42]\n'
        "    width = 120\n"
        "    height = 80\n"
        "\n"
        "[styles]\n"
        "    lines = true\n"
        "    star-graph = false\n",
        encoding="utf-8",
    )
    return path


def test_resolve_seeds(config_path, monkeypatch):
    monkeypatch.delenv("PATTERNCARD_SEED", raising=False)
    assert cli.resolve_seeds(cli.load_config(config_path)) == ["alpha", "42"]


def test_seed_env_override(config_path, monkeypatch):
    monkeypatch.setenv("PATTERNCARD_SEED", "from-env")
    assert cli.resolve_seeds(cli.load_config(config_path)) == ["from-env"]


def test_missing_seedlist(monkeypatch):
    monkeypatch.delenv("PATTERNCARD_SEED", raising=False)
    with pytest.raises(ValueError):
        cli.resolve_seeds({"style": {}})
    with pytest.raises(ValueError):
        cli.resolve_seeds({"style": {"seedlist": []}})


def test_enabled_styles(config_path):
    assert cli.enabled_styles(cli.load_config(config_path)) == ["lines"]
    with pytest.raises(ValueError):
        cli.enabled_styles({"styles": {"sparkles": True}})
    with pytest.raises(ValueError):
        cli.enabled_styles({"styles": {"lines": False}})
    with pytest.raises(TypeError):
        cli.enabled_styles({"styles": "lines"})


def test_render_batch(config_path, tmp_path, monkeypatch):
    monkeypatch.delenv("PATTERNCARD_SEED", raising=False)
    out = tmp_path / "output"
    written = cli.render_batch(cli.load_config(config_path), out)
    assert [p.name for p in written] == ["lines_alpha.svg", "lines_42.svg"]
    for path in written:
        root = parse(path.read_text(encoding="utf-8"))
        assert local(root.tag) == "svg"
        assert root.get("width") == "120"


def test_render_is_reproducible(config_path, tmp_path, monkeypatch):
    monkeypatch.delenv("PATTERNCARD_SEED", raising=False)
    config = cli.load_config(config_path)
    first = [p.read_bytes() for p in cli.render_batch(config, tmp_path / "a")]
    second = [p.read_bytes() for p in cli.render_batch(config, tmp_path / "b")]
    assert first == second


def test_sync_styles(config_path):
    cli.sync_styles(config_path)
    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    assert sorted(data["styles"]) == sorted(available_styles())
    assert data["styles"]["lines"] is True
    assert data["styles"]["wave-field"] is False
    assert data["style"]["seedlist"] == ["alpha", 42]


def test_write_seedlist(config_path):
    seeds = cli.write_seedlist(config_path, 4, 10, 20)
    assert len(seeds) == 4
    assert all(10 <= s <= 20 for s in seeds)
    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    assert data["style"]["seedlist"] == seeds
    assert data["style"]["width"] == 120


def test_write_seedlist_rejects_bad_bounds(config_path):
    with pytest.raises(ValueError):
        cli.write_seedlist(config_path, 0)
    with pytest.raises(ValueError):
        cli.write_seedlist(config_path, 3, 9, 1)


def test_main_render(config_path, tmp_path, monkeypatch):
    monkeypatch.delenv("PATTERNCARD_SEED", raising=False)
    out = tmp_path / "cards"
    assert cli.main(["--config", str(config_path), "render", "--output", str(out)]) == 0
    assert sorted(p.name for p in out.iterdir()) == ["lines_42.svg", "lines_alpha.svg"]


def test_main_show(capsys):
    assert cli.main(["show", "demo", "--style", "cell-grid", "--width", "200"]) == 0
    root = parse(capsys.readouterr().out)
    assert root.get("width") == "200"


def test_output_name():
    assert output_name("lines", "a/b c") == "lines_a_b_c.svg"
    assert output_name("lines", "x", ".png") == "lines_x.png"


def test_format_value():
    assert cli._format_value(True) == "true"
    assert cli._format_value([1, "a"]) == '[1, "a"]'
    with pytest.raises(TypeError):
        cli._format_value({"a": 1})


def test_png_export_needs_existing_svg(tmp_path):
    with pytest.raises(FileNotFoundError):
        svg_to_png(tmp_path / "missing.svg")
