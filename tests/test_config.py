from __future__ import annotations

import logging
import os

import pytest

from vectorgeom.config import GeometrySettings, configure_logging, load_environment


def test_load_environment_parses_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "\n"
        "VECTORGEOM_TEST_A=1\n"
        "VECTORGEOM_TEST_B = 'quoted'\n"
        "malformed line\n"
        "=missing_key\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("VECTORGEOM_TEST_A", raising=False)
    monkeypatch.setenv("VECTORGEOM_TEST_B", "kept")

    loaded = load_environment(env_file)

    assert loaded == {"VECTORGEOM_TEST_A": "1", "VECTORGEOM_TEST_B": "quoted"}
    assert os.environ["VECTORGEOM_TEST_A"] == "1"
    assert os.environ["VECTORGEOM_TEST_B"] == "kept"
    monkeypatch.delenv("VECTORGEOM_TEST_A")


def test_load_environment_override(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("VECTORGEOM_TEST_C=new\n", encoding="utf-8")
    monkeypatch.setenv("VECTORGEOM_TEST_C", "old")

    load_environment(env_file, override=True)

    assert os.environ["VECTORGEOM_TEST_C"] == "new"


def test_load_environment_missing_file(tmp_path):
    assert load_environment(tmp_path / "absent.env") == {}


def test_configure_logging_updates_existing_handlers(monkeypatch):
    root = logging.getLogger()
    handler = logging.StreamHandler()
    previous_level = root.level
    root.addHandler(handler)
    try:
        monkeypatch.setenv("VECTORGEOM_LOG_LEVEL", "debug")
        configure_logging(fmt="%(message)s")

        assert root.level == logging.DEBUG
        assert handler.level == logging.DEBUG
        assert handler.formatter._fmt == "%(message)s"
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("VECTORGEOM_REJECT_REPEATED_POINTS", "yes")
    monkeypatch.setenv("VECTORGEOM_SIMPLICITY_BACKEND", "BruteForce")

    settings = GeometrySettings.from_env()

    assert settings.reject_repeated_points
    assert settings.simplicity_backend == "bruteforce"


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("VECTORGEOM_REJECT_REPEATED_POINTS", raising=False)
    monkeypatch.delenv("VECTORGEOM_SIMPLICITY_BACKEND", raising=False)

    settings = GeometrySettings.from_env()

    assert not settings.reject_repeated_points
    assert settings.simplicity_backend == "shapely"


def test_settings_reject_unknown_backend():
    with pytest.raises(ValueError, match="Unknown simplicity backend"):
        GeometrySettings(simplicity_backend="magic")
