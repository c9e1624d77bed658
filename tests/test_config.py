import pytest
from pydantic import ValidationError

from summarize_ai.core.config import Settings


@pytest.mark.parametrize("value", [0, -1])
def test_timeout_must_be_positive(value):
    with pytest.raises(ValidationError):
        Settings(SUMMARY_TIMEOUT_SECONDS=value)


def test_timeout_and_session_cap_defaults():
    config = Settings(_env_file=None)

    assert config.SUMMARY_TIMEOUT_SECONDS is None
    assert config.MAX_SESSIONS == 1000


def test_session_cap_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(MAX_SESSIONS=0)
