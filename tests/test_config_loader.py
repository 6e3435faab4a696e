import pytest
from pydantic import ValidationError

from stripe_connect.integrations.clients.mocks import StaticStoreEnvironment
from stripe_connect.utils.config_loader import ConnectConfig, load_connect_config


@pytest.fixture(autouse=True)
def clear_connect_env(monkeypatch):
    for name in ("CONNECT_SERVER_URL", "CONNECT_API_VERSION", "CONNECT_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = ConnectConfig()

    assert cfg.server_url == "https://api.woocommerce.com/"
    assert cfg.timeout_seconds == 60.0
    assert cfg.accept_header == "application/vnd.woocommerce-connect.v3"


def test_load_from_yaml(tmp_path):
    path = tmp_path / "connect.yml"
    path.write_text(
        "server_url: https://connect.test/\n"
        "api_version: '5'\n"
        "store:\n"
        "  site_name: Test\n"
        "  site_url: https://t.example\n"
        "  country: NZ\n"
        "  full_address_available: false\n",
        encoding="utf-8",
    )

    cfg = load_connect_config(path)

    assert cfg.server_url == "https://connect.test/"
    assert cfg.api_version == "5"
    env = StaticStoreEnvironment.from_config(cfg.store)
    assert env.base_address() is None
    assert env.base_location().country == "NZ"


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "connect.yml"
    path.write_text("server_url: https://connect.test/\ntimeout_seconds: 60\n", encoding="utf-8")
    monkeypatch.setenv("CONNECT_SERVER_URL", "https://override.test/")
    monkeypatch.setenv("CONNECT_TIMEOUT_SECONDS", "15")

    cfg = load_connect_config(path)

    assert cfg.server_url == "https://override.test/"
    assert cfg.timeout_seconds == 15.0


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_connect_config(tmp_path / "absent.yml")


def test_invalid_values_rejected(tmp_path):
    path = tmp_path / "connect.yml"
    path.write_text("server_url: ftp://nope\ntimeout_seconds: 0\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_connect_config(path)
