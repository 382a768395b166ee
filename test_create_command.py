"""
End-to-end tests of the Create command against a fake Proxmox host
"""
import argparse
import logging
import pytest
from conftest import FakeHost, ScriptedPrompter
from commands.create import Create
from libs.errors import PlanError
from libs.plan import ProvisionPlan
from services import APTService, DiscoveryService, PCTService, TemplateService

TEMPLATE = "debian-12-standard_12.7-1_amd64.tar.zst"
MUTATING = ("pveam download", "pct create", "pct start", "pct exec")


def make_create(cfg, host, answers):
    pct_service = PCTService(host)
    prompter = ScriptedPrompter(answers)
    create = Create(
        cfg=cfg,
        host_service=host,
        pct_service=pct_service,
        discovery_service=DiscoveryService(host),
        template_service=TemplateService(host),
        apt_service=APTService(pct_service),
        prompter=prompter,
    )
    return create, prompter


def run(create, planonly=False):
    with pytest.raises(SystemExit) as excinfo:
        create.run(argparse.Namespace(planonly=planonly))
    return excinfo.value.code


def mutating_commands(host):
    return [c for c in host.commands if c.startswith(MUTATING)]


def test_single_storages_two_bridges_prompts_only_for_bridge_and_vlan(cfg, host):
    create, prompter = make_create(cfg, host, ["", "2", "100", "y"])
    plan = create.provision()

    assert prompter.asked == [
        "Hostname [newt]: ",
        "Select network bridge [1]: ",
        "VLAN tag (leave empty for none): ",
        "Proceed? [y/N]: ",
    ]
    assert plan.net0 == "name=eth0,bridge=vmbr1,ip=dhcp,tag=100"
    assert plan.storage == "local-lvm"
    assert plan.template_storage == "local"
    assert plan.template == TEMPLATE
    assert host.matching("pct create") == [
        f"pct create 100 local:vztmpl/{TEMPLATE} --hostname newt --memory 128 --swap 0 --cores 1 "
        "--rootfs local-lvm:2 --net0 name=eth0,bridge=vmbr1,ip=dhcp,tag=100 "
        "--unprivileged 0 --features nesting=1 --onboot 1 --start 0"
    ]


def test_non_ascii_digit_answers_are_reprompted_not_fatal(cfg, host):
    create, prompter = make_create(cfg, host, ["", "²", "2", "²", "100", "y"])
    plan = create.provision()

    assert prompter.asked.count("Select network bridge [1]: ") == 2
    assert prompter.asked.count("VLAN tag (leave empty for none): ") == 2
    assert plan.net0 == "name=eth0,bridge=vmbr1,ip=dhcp,tag=100"


def test_full_run_issues_commands_in_order(cfg, host, sleeps):
    create, _ = make_create(cfg, host, ["edge-1", "1", "", "yes"])
    create.provision()

    mutating = mutating_commands(host)
    assert mutating[0] == f"pveam download local {TEMPLATE}"
    assert mutating[1].startswith("pct create 100 ")
    assert "--net0 name=eth0,bridge=vmbr0,ip=dhcp " in mutating[1]
    assert mutating[2] == "pct start 100"
    assert mutating[3] == "pct exec 100 -- ping -c1 -W1 github.com"
    assert mutating[4].startswith("pct exec 100 -- bash -c ")
    assert "apt-get -qq install -y curl ca-certificates" in mutating[4]
    assert host.interactive == [
        "pct exec 100 -- bash -c 'curl -sL "
        "https://raw.githubusercontent.com/dpurnam/scripts/main/newt/newt-service-manager.sh | bash'"
    ]
    assert len(mutating) == 6
    # settle delay only; the probe succeeded first time
    assert sleeps == [5]


def test_cached_template_is_not_downloaded(cfg, host):
    host.on("pveam list local", f"NAME SIZE\nlocal:vztmpl/{TEMPLATE} 126.11MB\n")
    create, _ = make_create(cfg, host, ["", "1", "", "y"])
    create.provision()
    assert host.matching("pveam download") == []
    assert len(host.matching("pct create")) == 1


def test_declined_confirmation_exits_cleanly_without_side_effects(cfg, host, caplog):
    create, _ = make_create(cfg, host, ["", "2", "", "n"])
    with caplog.at_level(logging.INFO):
        assert run(create) == 0
    assert mutating_commands(host) == []
    assert "Aborted by user." in caplog.text


@pytest.mark.parametrize("content", ["rootdir", "vztmpl"])
def test_empty_storage_discovery_exits_nonzero_before_mutation(cfg, host, content, caplog):
    host.on(f"pvesm status --content {content}", "Name Type Status Total Used Available %\n")
    create, prompter = make_create(cfg, host, [])
    assert run(create) == 1
    assert mutating_commands(host) == []
    assert prompter.asked == []
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert content in errors[0].getMessage()


def test_missing_pct_is_a_precondition_failure(cfg):
    host = FakeHost(pct_available=False)
    create, _ = make_create(cfg, host, [])
    assert run(create) == 1
    assert host.commands == []


def test_non_root_is_a_precondition_failure(cfg):
    host = FakeHost(root=False)
    create, _ = make_create(cfg, host, [])
    assert run(create) == 1
    assert host.commands == []


def test_missing_template_exits_nonzero_before_confirmation(cfg, host, caplog):
    host.on("pveam available", "system  ubuntu-24.04-standard_24.04-2_amd64.tar.zst\n")
    create, prompter = make_create(cfg, host, ["", "1", ""])
    assert run(create) == 1
    assert "Proceed? [y/N]: " not in prompter.asked
    assert mutating_commands(host) == []
    assert "pveam update" in caplog.text


def test_network_timeout_aborts_before_package_install(cfg, host, sleeps):
    host.on("pct exec 100 -- ping", "", 1)
    create, _ = make_create(cfg, host, ["", "1", "", "y"])
    assert run(create) == 1
    assert len(host.matching("pct exec 100 -- ping")) == 30
    assert host.matching("pct exec 100 -- bash") == []
    assert sleeps == [5] + [1] * 29


def test_failed_create_propagates_without_start(cfg, host):
    host.on("pct create", "unable to create CT 100 - no space left on device", 255)
    create, _ = make_create(cfg, host, ["", "1", "", "y"])
    assert run(create) == 1
    assert host.matching("pct start") == []


def test_planonly_touches_nothing(cfg, host, caplog):
    create, _ = make_create(cfg, host, [])
    with caplog.at_level(logging.INFO):
        assert run(create, planonly=True) == 0
    assert host.commands == []
    assert "create and start container" in caplog.text


def test_plan_validation_rejects_unresolved_values():
    with pytest.raises(PlanError, match="bridge"):
        ProvisionPlan(ctid=100, hostname="newt", storage="local-lvm",
                      template_storage="local", template=TEMPLATE).validate()
