"""
Tests for configuration loading and environment overrides
"""
import pytest
from libs.config import DEFAULT_INSTALLER_URL, NewtLxcConfig, load_config
from libs.errors import ConfigError

CONFIG_YAML = """\
hostname: edge
resources:
  memory: 256
  rootfs_size: 4
proxmox:
  storage: local-zfs
  bridge: vmbr1
waits:
  network_attempts: 10
newt:
  endpoint: https://pangolin.example.com
  packages: [curl]
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("NEWT_HOSTNAME", "NEWT_BRIDGE", "NEWT_MEMORY", "NEWT_DISK", "NEWT_STORAGE", "NEWT_TEMPLATE_STORAGE"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    cfg = NewtLxcConfig()
    assert cfg.hostname == "newt"
    assert cfg.resources.memory == 128
    assert cfg.resources.rootfs_size == 2
    assert cfg.proxmox_storage is None
    assert cfg.proxmox.default_bridge == "vmbr0"
    assert cfg.template.pattern == "debian-12-standard"
    assert (cfg.waits.network_attempts, cfg.waits.network_interval, cfg.waits.settle_delay) == (30, 1, 5)
    assert cfg.newt.installer_url == DEFAULT_INSTALLER_URL
    assert cfg.newt.packages == ["curl", "ca-certificates"]


def test_load_yaml(tmp_path):
    path = tmp_path / "newt-lxc.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    cfg = load_config(path, required=True)
    assert cfg.hostname == "edge"
    assert cfg.resources.memory == 256
    assert cfg.resources.rootfs_size == 4
    assert cfg.proxmox_storage == "local-zfs"
    assert cfg.proxmox_bridge == "vmbr1"
    assert cfg.proxmox_template_storage is None
    assert cfg.waits.network_attempts == 10
    assert cfg.waits.network_interval == 1
    assert cfg.newt.endpoint == "https://pangolin.example.com"
    assert cfg.newt.packages == ["curl"]


def test_missing_optional_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "absent.yaml") == NewtLxcConfig()


def test_missing_required_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml", required=True)


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == NewtLxcConfig()


@pytest.mark.parametrize("content", [
    "hostname: [unclosed",
    "- just\n- a list\n",
    "resources:\n  memory: lots\n",
    "newt:\n  packages: []\n",
    "newt:\n  packages: {curl: 1}\n",
    "newt:\n  packages: [curl, 7]\n",
])
def test_invalid_files_are_config_errors(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_scalar_packages_value_is_one_package():
    cfg = NewtLxcConfig.from_dict({"newt": {"packages": "curl"}})
    assert cfg.newt.packages == ["curl"]
    cfg = NewtLxcConfig.from_dict({"newt": {"packages": None}})
    assert cfg.newt.packages == ["curl", "ca-certificates"]


def test_env_overrides():
    env = {
        "NEWT_HOSTNAME": "newt-mfh",
        "NEWT_BRIDGE": "vmbr2",
        "NEWT_MEMORY": "512",
        "NEWT_DISK": "8",
        "NEWT_STORAGE": "local-lvm",
        "NEWT_TEMPLATE_STORAGE": "nfs-templates",
    }
    cfg = NewtLxcConfig().apply_env(env)
    assert cfg.hostname == "newt-mfh"
    assert cfg.proxmox_bridge == "vmbr2"
    assert cfg.resources.memory == 512
    assert cfg.resources.rootfs_size == 8
    assert cfg.proxmox_storage == "local-lvm"
    assert cfg.proxmox_template_storage == "nfs-templates"


def test_empty_env_values_are_ignored():
    cfg = NewtLxcConfig().apply_env({"NEWT_HOSTNAME": "", "NEWT_MEMORY": ""})
    assert cfg.hostname == "newt"
    assert cfg.resources.memory == 128


@pytest.mark.parametrize("env", [{"NEWT_MEMORY": "big"}, {"NEWT_DISK": "-1"}, {"NEWT_MEMORY": "0"}])
def test_bad_numeric_env_is_a_config_error(env):
    with pytest.raises(ConfigError):
        NewtLxcConfig().apply_env(env)
