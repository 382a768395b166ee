"""
Shared pytest fixtures: fake host, scripted prompter, sleep recorder
"""
import time
from typing import Callable, List, Optional, Tuple, Union
import pytest
from libs.config import NewtLxcConfig
from services import APTService, DiscoveryService, HostService, PCTService, TemplateService
from actions import ActionContext

PVESH_NEXTID = "100"

PVESM_ROOTDIR = """\
Name             Type     Status           Total            Used       Available        %
local-lvm     lvmthin     active       147550208        10000000       137550208    6.78%
"""

PVESM_VZTMPL = """\
Name             Type     Status           Total            Used       Available        %
local             dir     active        98497780        12345678        86152102   12.53%
"""

IP_BRIDGES = """\
4: vmbr0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc noqueue state UP mode DEFAULT group default qlen 1000\\    link/ether aa:bb:cc:dd:ee:01 brd ff:ff:ff:ff:ff:ff
5: vmbr1: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc noqueue state UP mode DEFAULT group default qlen 1000\\    link/ether aa:bb:cc:dd:ee:02 brd ff:ff:ff:ff:ff:ff
"""

PVEAM_AVAILABLE = """\
system          almalinux-9-default_20240911_amd64.tar.xz
system          debian-11-standard_11.7-1_amd64.tar.zst
system          debian-12-standard_12.2-1_amd64.tar.zst
system          debian-12-standard_12.7-1_amd64.tar.zst
system          ubuntu-24.04-standard_24.04-2_amd64.tar.zst
"""

PVEAM_LIST_EMPTY = "NAME                                                         SIZE\n"

Response = Union[Tuple[Optional[str], Optional[int]], Callable[[str], Tuple[Optional[str], Optional[int]]]]


class FakeHost(HostService):
    """HostService double: records commands, answers from prefix rules"""

    def __init__(self, pct_available: bool = True, root: bool = True):
        super().__init__()
        self.commands: List[str] = []
        self.interactive: List[str] = []
        self.rules: List[Tuple[str, Response]] = []
        self.pct_available = pct_available
        self.root = root

    def on(self, prefix: str, output: Optional[str] = "", exit_code: Optional[int] = 0) -> "FakeHost":
        """Answer commands starting with prefix; later rules win"""
        self.rules.insert(0, (prefix, (output, exit_code)))
        return self

    def on_call(self, prefix: str, responder) -> "FakeHost":
        """Answer commands starting with prefix through a callable"""
        self.rules.insert(0, (prefix, responder))
        return self

    def execute(self, command, timeout=None, interactive=False):
        self.commands.append(command)
        if interactive:
            self.interactive.append(command)
        for prefix, response in self.rules:
            if command.startswith(prefix):
                if callable(response):
                    return response(command)
                return response
        return "", 0

    def command_exists(self, name):
        return self.pct_available if name == "pct" else True

    def is_root(self):
        return self.root

    def matching(self, prefix: str) -> List[str]:
        return [c for c in self.commands if c.startswith(prefix)]


class ScriptedPrompter:
    """Input provider answering from a list; records what was asked"""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.asked: List[str] = []
        self.shown: List[str] = []

    def say(self, text=""):
        self.shown.append(text)

    def ask(self, prompt):
        self.asked.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.answers.pop(0).strip()


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    """Replace time.sleep with a recorder"""
    calls = []
    monkeypatch.setattr(time, "sleep", calls.append)
    return calls


@pytest.fixture
def cfg():
    return NewtLxcConfig()


@pytest.fixture
def host():
    """Host with one rootfs storage, one template storage, two bridges, an uncached template"""
    fake = FakeHost()
    fake.on("pvesh get", PVESH_NEXTID)
    fake.on("pvesm status --content rootdir", PVESM_ROOTDIR)
    fake.on("pvesm status --content vztmpl", PVESM_VZTMPL)
    fake.on("ip -o link show type bridge", IP_BRIDGES)
    fake.on("pveam available", PVEAM_AVAILABLE)
    fake.on("pveam list", PVEAM_LIST_EMPTY)
    return fake


@pytest.fixture
def make_ctx(cfg):
    def _make(host, prompter=None):
        pct_service = PCTService(host)
        return ActionContext(
            host_service=host,
            pct_service=pct_service,
            discovery_service=DiscoveryService(host, default_bridge=cfg.proxmox.default_bridge),
            template_service=TemplateService(host, section=cfg.template.section),
            apt_service=APTService(pct_service),
            prompter=prompter or ScriptedPrompter(),
        )
    return _make
