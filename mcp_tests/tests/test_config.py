import importlib

import config


def _reload(monkeypatch, **env):
    for name in ("CACHE_DEFAULT_TTL", "CACHE_SCHEDULER", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return importlib.reload(config)


def test_config_defaults(monkeypatch):
    cfg = _reload(monkeypatch)

    assert cfg.CACHE_DEFAULT_TTL == 60.0
    assert cfg.CACHE_SCHEDULER == "thread"
    assert cfg.LOG_LEVEL == "INFO"


def test_config_reads_env(monkeypatch):
    cfg = _reload(
        monkeypatch,
        CACHE_DEFAULT_TTL=" 2.5 ",
        CACHE_SCHEDULER="AsyncIO",
        LOG_LEVEL="debug",
    )

    assert cfg.CACHE_DEFAULT_TTL == 2.5
    assert cfg.CACHE_SCHEDULER == "asyncio"
    assert cfg.LOG_LEVEL == "debug"


def test_config_malformed_values_fall_back(monkeypatch):
    cfg = _reload(monkeypatch, CACHE_DEFAULT_TTL="soon", CACHE_SCHEDULER="   ")

    assert cfg.CACHE_DEFAULT_TTL == 60.0
    assert cfg.CACHE_SCHEDULER == "thread"


def teardown_module(module):
    importlib.reload(config)
