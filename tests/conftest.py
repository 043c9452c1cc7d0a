import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep saved defaults out of the real home directory."""
    path = tmp_path / "pwdg" / "config.json"
    monkeypatch.setenv("PWDG_CONFIG", str(path))
    return path
