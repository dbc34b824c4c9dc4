import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def isolated_cwd(tmp_path, monkeypatch):
    """Runs from an empty directory so no config file or size override leaks in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SECURE_SLUGIFY_MAX_INPUT_SIZE", raising=False)
    return tmp_path
