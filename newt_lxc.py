#!/usr/bin/env python3
"""
newt-lxc - Create a minimal Debian LXC on Proxmox and launch the Newt agent setup
Run on the Proxmox host as root.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional
from dependency_injector import containers, providers
from commands.create import Create
from libs.config import NewtLxcConfig, load_config
from libs.errors import ConfigError
from libs.logger import get_logger, init_logger
from libs.prompts import ConsolePrompter
from services import APTService, DiscoveryService, HostService, PCTService, TemplateService

SCRIPT_DIR = Path(__file__).parent.absolute()
CONFIG_FILE = SCRIPT_DIR / "newt-lxc.yaml"
logger = get_logger(__name__)


def get_config(config_path: Optional[str] = None) -> NewtLxcConfig:
    """Load the YAML configuration (optional unless given explicitly) and apply NEWT_* overrides"""
    if config_path:
        cfg = load_config(Path(config_path), required=True)
    else:
        cfg = load_config(CONFIG_FILE)
    return cfg.apply_env()


def build_container(config_path: Optional[str] = None) -> containers.DynamicContainer:
    """Wire configuration, services and the create command"""
    di = containers.DynamicContainer()

    # Lazy-load config: only read when the command is resolved
    di.config = providers.Singleton(get_config, config_path)

    di.host_service = providers.Singleton(HostService)
    di.prompter = providers.Singleton(ConsolePrompter)

    di.pct_service = providers.Factory(PCTService, host_service=di.host_service)

    def create_discovery_service(host_service, cfg):
        return DiscoveryService(host_service, default_bridge=cfg.proxmox.default_bridge)

    di.discovery_service = providers.Factory(
        create_discovery_service, host_service=di.host_service, cfg=di.config
    )

    def create_template_service(host_service, cfg):
        return TemplateService(host_service, section=cfg.template.section)

    di.template_service = providers.Factory(
        create_template_service, host_service=di.host_service, cfg=di.config
    )
    di.apt_service = providers.Factory(APTService, pct_service=di.pct_service)

    di.create = providers.Factory(
        Create,
        cfg=di.config,
        host_service=di.host_service,
        pct_service=di.pct_service,
        discovery_service=di.discovery_service,
        template_service=di.template_service,
        apt_service=di.apt_service,
        prompter=di.prompter,
    )
    return di


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Create a minimal Debian LXC on Proxmox and launch the Newt service manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment overrides: NEWT_HOSTNAME, NEWT_BRIDGE, NEWT_MEMORY, NEWT_DISK, "
            "NEWT_STORAGE, NEWT_TEMPLATE_STORAGE"
        ),
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show every host command")
    parser.add_argument("--config", "-c", default=None, help=f"Configuration file (default: {CONFIG_FILE})")
    parser.add_argument("--log-file", default=None, help="Also write a detailed log to this file")
    parser.add_argument("--planonly", action="store_true", help="Show the provisioning steps and exit")
    return parser.parse_args(argv)


def main(argv=None):
    """Main CLI entry point"""
    args = parse_args(argv)
    log_level = logging.DEBUG if args.verbose else logging.INFO
    init_logger(level=log_level, log_file=args.log_file)

    di = build_container(args.config)
    try:
        create = di.create()
    except ConfigError as err:
        logger.error("%s: %s", err.label, err)
        sys.exit(1)
    create.run(args)


if __name__ == "__main__":
    main()
