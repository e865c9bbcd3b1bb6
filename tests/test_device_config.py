import json

import pytest

from asyncsamsungac.exceptions.config import ConfigurationError
from asyncsamsungac.models.device_config import AirConditionerConfig


def test_defaults():
    config = AirConditionerConfig(host="192.168.1.60", token="secret", cert_path="ac.pem")

    assert config.port == 8888
    assert config.device_index == 0
    assert config.cache_ttl == 3.0
    assert config.timeout == 5.0
    assert config.eager_refresh is True
    assert config.base_url == "https://192.168.1.60:8888"


def test_plugin_style_keys():
    config = AirConditionerConfig.from_dict({
        "accessory": "SamsungAirconditioner",
        "name": "Living room",
        "ip": "192.168.1.60",
        "token": "secret",
        "patchCert": "/home/pi/ac14k_m.pem",
        "deviceIndex": 1,
        "cacheDuration": 2500,
        "serialNumber": "SN1",
    })

    assert config.host == "192.168.1.60"
    assert config.cert_path == "/home/pi/ac14k_m.pem"
    assert config.device_index == 1
    assert config.cache_ttl == 2.5
    assert config.serial_number == "SN1"
    assert config.name == "Living room"


@pytest.mark.parametrize("overrides", [
    {"token": ""},
    {"patchCert": " "},
    {"deviceIndex": -1},
    {"cacheDuration": -1},
    {"timeout": 0},
    {"ip": ""},
])
def test_invalid_values(overrides):
    data = {"ip": "192.168.1.60", "token": "secret", "patchCert": "ac.pem"}
    data.update(overrides)

    with pytest.raises(ConfigurationError):
        AirConditionerConfig.from_dict(data)


def test_missing_required_field():
    with pytest.raises(ConfigurationError):
        AirConditionerConfig.from_dict({"ip": "192.168.1.60"})


def test_from_file(tmp_path):
    path = tmp_path / "ac.json"
    path.write_text(json.dumps({"ip": "10.0.0.5", "token": "t", "patchCert": "c.pem"}))

    config = AirConditionerConfig.from_file(path)

    assert config.host == "10.0.0.5"


def test_from_file_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        AirConditionerConfig.from_file(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        AirConditionerConfig.from_file(bad)
