from __future__ import annotations

from pathlib import Path

import pytest

from ccds.config import ConfigError, ConfigStore, ProjectConfig

def test_write_then_load(store: ConfigStore, make_config) -> None:
    config = make_config(author="Ada", license="BSD-3-Clause", language="R")
    path = store.write(config)
    assert path == config.project_root / ".ccds" / "config.yml"
    assert store.load(store.find(config.project_root)) == config.to_record()
    assert store.is_initialized(config.project_root)

def test_record_keys(make_config) -> None:
    record = make_config().to_record()
    assert list(record) == ["ProjectRoot", "Author", "License", "PrimaryLanguage"]

def test_not_initialized_without_config(store: ConfigStore, project: Path) -> None:
    assert store.find(project) is None
    assert not store.is_initialized(project)

def test_find_walks_up_to_parent_project(store: ConfigStore, make_config) -> None:
    config = make_config()
    store.write(config)
    nested = config.project_root / "src" / "models"
    nested.mkdir(parents=True)
    assert store.find(nested) == config.project_root / ".ccds" / "config.yml"
    assert store.is_initialized(nested)

def test_empty_project_root_is_not_initialized(store: ConfigStore, project: Path) -> None:
    (project / ".ccds").mkdir()
    (project / ".ccds" / "config.yml").write_text("ProjectRoot: ''\n", encoding="utf-8")
    assert not store.is_initialized(project)

def test_malformed_config(store: ConfigStore, project: Path) -> None:
    (project / ".ccds").mkdir()
    (project / ".ccds" / "config.yml").write_text("- not\n- a mapping\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        store.is_initialized(project)

def test_config_rejects_unknown_values(project: Path) -> None:
    with pytest.raises(ConfigError, match="unknown license"):
        ProjectConfig(project_root=project, author="", license="GPL", primary_language="python")
    with pytest.raises(ConfigError, match="unknown language"):
        ProjectConfig(project_root=project, author="", license="MIT", primary_language="cobol")
