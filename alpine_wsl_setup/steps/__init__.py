from .step_00_preflight import PreflightStep
from .step_10_switch_repositories import SwitchRepositoriesStep
from .step_20_update_system import UpdateSystemStep
from .step_30_install_packages import InstallPackagesStep
from .step_40_add_missing import AddMissingCompletionsStep, AddMissingDocsStep
from .step_50_write_configs import GenerateDoasConfStep, GenerateWslConfStep
from .step_60_enable_services import EnableServiceStep
from .step_70_install_pip_tools import InstallPipToolsStep
from .step_80_default_user import (
    AddUserToAdminGroupStep,
    EnableRootlessPodmanStep,
    SetLoginShellStep,
    SetPasswordStep,
)

__all__ = [
    "PreflightStep",
    "SwitchRepositoriesStep",
    "UpdateSystemStep",
    "InstallPackagesStep",
    "AddMissingCompletionsStep",
    "AddMissingDocsStep",
    "GenerateWslConfStep",
    "GenerateDoasConfStep",
    "EnableServiceStep",
    "InstallPipToolsStep",
    "AddUserToAdminGroupStep",
    "EnableRootlessPodmanStep",
    "SetPasswordStep",
    "SetLoginShellStep",
]
