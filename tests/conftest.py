import pytest
from click.testing import CliRunner

from seedpass import DEFAULT_POLICY, Charset

SEEDPASS_ENV_VARS = (
    "SEEDPASS_POLICY",
    "SEEDPASS_LENGTH",
    "SEEDPASS_LENGTH__MIN",
    "SEEDPASS_LENGTH__MAX",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in SEEDPASS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def charset() -> Charset:
    """a-z (1, 10), A-Z (1, 10), 0-9 (1, 5) and @_-#~!& (0, 1)"""
    return DEFAULT_POLICY.build_charset()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
