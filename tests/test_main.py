from __future__ import annotations

import json

import pytest

from main import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_generates_growing_levels(capsys):
    main(["3", "--seed", "7", "--width", "3", "--height", "3", "--loops", "1"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[0].startswith("Generated level1: 3x3")
    assert out[1].startswith("Generated level2: 4x4")
    assert out[2].startswith("Generated level3: 5x5")
    assert all("connected=True" in line for line in out)


def test_seed_makes_output_repeatable(capsys):
    args = ["2", "--seed", "3", "--width", "6", "--height", "4", "--ascii"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    assert capsys.readouterr().out == first


def test_ascii_output(capsys):
    main(["1", "--seed", "1", "--width", "2", "--height", "1", "--branching", "0", "--loops", "0", "--ascii"])
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["#####", "#S.G#", "#####"]


def test_writes_pngs(tmp_path, capsys):
    out_dir = tmp_path / "renders"
    main(["2", "--seed", "5", "--out", str(out_dir)])
    assert (out_dir / "level1.png").exists()
    assert (out_dir / "level2.png").exists()


def test_reads_config_file(tmp_path, capsys):
    cfg = tmp_path / "maze.json"
    cfg.write_text(json.dumps({"maze": {"width": 4, "height": 2, "size_increment": 0}}), encoding="utf-8")
    main(["2", "--config", str(cfg), "--seed", "2"])
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Generated level1: 4x2")
    assert out[1].startswith("Generated level2: 4x2")


def test_default_config_json_in_cwd_is_used(tmp_path, capsys):
    (tmp_path / "config.json").write_text(json.dumps({"maze": {"width": 2, "height": 7}}), encoding="utf-8")
    main(["1"])
    assert capsys.readouterr().out.startswith("Generated level1: 2x7")


def test_count_must_be_positive():
    with pytest.raises(SystemExit):
        main(["0"])
