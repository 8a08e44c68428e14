import os

import pytest


def _make_version(base, name):
    version_dir = base / name
    (version_dir / "data").mkdir(parents=True)
    (version_dir / "StarCitizen_Launcher.exe").write_bytes(b"")
    return version_dir


@pytest.fixture
def make_version():
    return _make_version


@pytest.fixture
def game_folder(tmp_path):
    base = tmp_path / "Roberts Space Industries" / "StarCitizen"
    base.mkdir(parents=True)
    return base


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SCLOCALIZER_DATA_DIR", str(tmp_path / "userdata"))
    return os.environ["SCLOCALIZER_DATA_DIR"]
