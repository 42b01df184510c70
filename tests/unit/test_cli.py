# tests/unit/test_cli.py
from __future__ import annotations

import json
from pathlib import Path

from folio.cli import main
from tests.utils import write_json


def _site(public_dir: Path, make_image) -> Path:
    make_image(public_dir / "Media" / "Proj X" / "2.png")
    make_image(public_dir / "Media" / "Proj X" / "1.png")
    make_image(public_dir / "Media" / "Probe" / "hero.webp", fmt="WEBP")
    data_dir = public_dir / "data"
    write_json(
        data_dir / "projects.json",
        {
            "projects": [
                {"id": 1, "title": "X", "media": [{"type": "gallery", "src": "Media/Proj X", "alt": "x"}]},
                {"id": 2, "title": "Probe", "media": [{"type": "gallery", "baseSrc": "Media/Probe", "images": []}]},
                {"id": 3, "title": "Blog", "media": [{"type": "blog", "src": "https://blog.example"}]},
            ]
        },
    )
    write_json(data_dir / "achievements.json", {"achievements": [], "leadership": [], "volunteering": []})
    return data_dir


def test_manifest_command(public_dir: Path, make_image, capsys) -> None:
    data_dir = _site(public_dir, make_image)

    rc = main(["manifest", "--public-dir", str(public_dir)])

    assert rc == 0
    out = capsys.readouterr().out
    assert "projects.json: 2 galleries" in out
    assert "achievements.json: 0 galleries" in out
    data = json.loads((data_dir / "projects.json").read_text(encoding="utf-8"))
    assert data["projects"][0]["media"][0]["images"] == ["Media/Proj X/1.png", "Media/Proj X/2.png"]


def test_manifest_command_reports_missing_file(public_dir: Path, capsys) -> None:
    rc = main(["manifest", "--public-dir", str(public_dir), "--data", str(public_dir / "nope.json")])
    assert rc == 1
    assert "failed:" in capsys.readouterr().out


def test_thumbs_command_offline(public_dir: Path, make_image, capsys) -> None:
    data_dir = _site(public_dir, make_image)

    rc = main(
        [
            "thumbs",
            "--data-dir",
            str(data_dir),
            "--public-dir",
            str(public_dir),
            "--base-path",
            "/portfolio",
        ]
    )

    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "projects\t1\t/portfolio/Media/Proj%20X/1.png"
    assert lines[1] == "projects\t2\t/portfolio/Media/Probe/hero.webp"
    assert lines[2] == "projects\t3\t-"
    assert lines[-1] == "thumbnails: 2/3"


def test_thumbs_command_bad_data(tmp_path: Path, capsys) -> None:
    (tmp_path / "projects.json").write_text("[", encoding="utf-8")
    rc = main(["thumbs", "--data-dir", str(tmp_path), "--public-dir", str(tmp_path)])
    assert rc == 2
    assert capsys.readouterr().out.startswith("error:")
