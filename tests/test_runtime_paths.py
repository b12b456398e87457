from __future__ import annotations

from pathlib import Path

from themecascade import runtime_paths


def test_source_builtin_themes_path_resolves() -> None:
    root = runtime_paths.builtin_themes_root()
    assert root.parent.parent.name == "themecascade"
    assert (root / "invariant.css").is_file()


def test_frozen_prefers_bundled_package_dir(tmp_path: Path, monkeypatch) -> None:
    bundle = tmp_path / "bundle"
    themes = bundle / "themecascade" / "themes" / "builtin"
    themes.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle), raising=False)

    assert runtime_paths.builtin_themes_root() == themes


def test_frozen_falls_back_to_bundle_root(tmp_path: Path, monkeypatch) -> None:
    bundle = tmp_path / "bundle"
    bundle.mkdir()
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle), raising=False)

    assert runtime_paths.builtin_themes_root() == bundle / "themes" / "builtin"
