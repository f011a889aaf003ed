import pytest
from mapforge import config as mapforge_config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """
    Keeps each test independent of the user's config file and of config
    loaded by other tests.
    """
    monkeypatch.setattr(mapforge_config, "config_mgr", None)
    monkeypatch.setattr(mapforge_config, "config", None)
    monkeypatch.delenv("MAPFORGE_CONFIG_FILE", raising=False)
    monkeypatch.delenv("MAPFORGE_DEBUG", raising=False)
    yield
