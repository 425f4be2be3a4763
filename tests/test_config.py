import pytest
from pydantic import ValidationError

from fixed_merkle import config
from fixed_merkle.config import load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Keep a developer's .env out of the picture.
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    for var in ("MERKLE_LEVELS", "MERKLE_COMBINER", "MERKLE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_defaults_when_unset():
    cfg = load_config()
    assert cfg.levels == 20
    assert cfg.combiner == "sum"
    assert cfg.log_level == "WARNING"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("MERKLE_LEVELS", " 4 ")
    monkeypatch.setenv("MERKLE_COMBINER", "sha256")
    monkeypatch.setenv("MERKLE_LOG_LEVEL", "debug")

    cfg = load_config()
    assert cfg.levels == 4
    assert cfg.combiner == "sha256"
    assert cfg.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("MERKLE_LEVELS", "   ")
    assert load_config().levels == 20


@pytest.mark.parametrize(
    "var, value",
    [
        ("MERKLE_LEVELS", "-1"),
        ("MERKLE_LEVELS", "deep"),
        ("MERKLE_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_raise(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        load_config()


def test_dotenv_is_loaded(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_dotenv", lambda: calls.append(True))
    load_config()
    assert calls == [True]
