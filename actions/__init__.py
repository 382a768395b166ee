"""
Provisioning steps, in execution order
"""
from .base import Action, ActionContext
from .preflight import PreflightAction
from .discover_resources import DiscoverResourcesAction
from .collect_parameters import CollectParametersAction
from .resolve_template import ResolveTemplateAction
from .confirm import ConfirmAction
from .download_template import DownloadTemplateAction
from .create_container import CreateContainerAction
from .wait_for_network import WaitForNetworkAction
from .install_dependencies import InstallDependenciesAction
from .bootstrap_newt import BootstrapNewtAction

STEPS = [
    PreflightAction,
    DiscoverResourcesAction,
    CollectParametersAction,
    ResolveTemplateAction,
    ConfirmAction,
    DownloadTemplateAction,
    CreateContainerAction,
    WaitForNetworkAction,
    InstallDependenciesAction,
    BootstrapNewtAction,
]

__all__ = [
    "Action",
    "ActionContext",
    "STEPS",
    "PreflightAction",
    "DiscoverResourcesAction",
    "CollectParametersAction",
    "ResolveTemplateAction",
    "ConfirmAction",
    "DownloadTemplateAction",
    "CreateContainerAction",
    "WaitForNetworkAction",
    "InstallDependenciesAction",
    "BootstrapNewtAction",
]
