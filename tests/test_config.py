import pytest

from eventbus.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.log_level == "INFO"
    assert settings.json_logs is False
    assert settings.tick_interval == 0.1
    assert settings.tick_count == 10


def test_from_env():
    settings = Settings.from_env(
        {
            "EVENTBUS_LOG_LEVEL": "debug",
            "EVENTBUS_LOG_JSON": "1",
            "EVENTBUS_TICK_INTERVAL": "0",
            "EVENTBUS_TICK_COUNT": "3",
        }
    )
    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True
    assert settings.tick_interval == 0.0
    assert settings.tick_count == 3


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("EVENTBUS_TICK_COUNT", "4")
    assert Settings.from_env().tick_count == 4


@pytest.mark.parametrize(
    "kwargs",
    [{"log_level": "LOUD"}, {"tick_interval": -1.0}, {"tick_count": -2}],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)


def test_malformed_number_names_variable():
    with pytest.raises(ValueError, match="EVENTBUS_TICK_INTERVAL must be float, got 'fast'"):
        Settings.from_env({"EVENTBUS_TICK_INTERVAL": "fast"})
