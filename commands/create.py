"""Create command orchestration."""
from __future__ import annotations
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional, Type, TYPE_CHECKING
from actions import STEPS, Action, ActionContext
from libs.command import Command
from libs.errors import AbortedByUser, ProvisionError
from libs.logger import get_logger
from libs.plan import ProvisionPlan
if TYPE_CHECKING:
    from services import APTService, DiscoveryService, HostService, PCTService, TemplateService
logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _log_create_plan(steps: List[Type[Action]]):
    """Log a numbered list of all steps, marking the ones that change the host."""
    logger.info("Provisioning plan (%d steps):", len(steps))
    for num, step in enumerate(steps, start=1):
        marker = "HOST" if step.mutates_host else "read"
        logger.info("  [%2d] %-4s %s", num, marker, step.description)


@dataclass
class Create(Command):
    """Provision a Debian LXC and bootstrap the Newt agent."""
    host_service: Optional["HostService"] = field(default=None)
    pct_service: Optional["PCTService"] = field(default=None)
    discovery_service: Optional["DiscoveryService"] = field(default=None)
    template_service: Optional["TemplateService"] = field(default=None)
    apt_service: Optional["APTService"] = field(default=None)
    prompter: Any = field(default=None)
    steps: List[Type[Action]] = field(default_factory=lambda: list(STEPS))

    def run(self, args):
        """Execute the workflow and exit with its status."""
        if getattr(args, "planonly", False):
            _log_create_plan(self.steps)
            sys.exit(EXIT_OK)
        try:
            self.provision()
        except AbortedByUser:
            logger.info("Aborted by user.")
            sys.exit(EXIT_OK)
        except KeyboardInterrupt:
            logger.error("Interrupted.")
            sys.exit(EXIT_INTERRUPTED)
        except ProvisionError as err:
            logger.error("%s: %s", err.label, err)
            sys.exit(EXIT_FAILURE)

    def provision(self) -> ProvisionPlan:
        """Run every step in order; the first error stops the sequence."""
        ctx = ActionContext(
            host_service=self.host_service,
            pct_service=self.pct_service,
            discovery_service=self.discovery_service,
            template_service=self.template_service,
            apt_service=self.apt_service,
            prompter=self.prompter,
        )
        plan = ProvisionPlan(
            hostname=self.cfg.hostname,
            memory=self.cfg.resources.memory,
            rootfs_size=self.cfg.resources.rootfs_size,
        )
        for num, step_cls in enumerate(self.steps, start=1):
            step = step_cls(self.cfg, ctx)
            logger.debug("Step %d/%d: %s", num, len(self.steps), step.description)
            plan = step.execute(plan)
        return plan
