"""
Base class for provisioning steps
"""
from dataclasses import dataclass
from typing import Any
from libs.config import NewtLxcConfig
from libs.plan import ProvisionPlan
from services import APTService, DiscoveryService, HostService, PCTService, TemplateService


@dataclass
class ActionContext:
    """Collaborators shared by every step"""
    host_service: HostService
    pct_service: PCTService
    discovery_service: DiscoveryService
    template_service: TemplateService
    apt_service: APTService
    prompter: Any


class Action:
    """A single step: takes the current plan, returns the next one or raises ProvisionError"""
    description = "action"
    mutates_host = False

    def __init__(self, cfg: NewtLxcConfig, ctx: ActionContext):
        self.cfg = cfg
        self.ctx = ctx

    def execute(self, plan: ProvisionPlan) -> ProvisionPlan:
        """Run the step"""
        raise NotImplementedError
