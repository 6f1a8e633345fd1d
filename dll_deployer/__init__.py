"""dll-deployer: copy the dll closure of a Windows binary next to it."""

__version__ = "0.1.0"

from dll_deployer.classifier import Classification, DependencyClassifier
from dll_deployer.deployer import DllDeployer
from dll_deployer.models.config import DeployConfig
from dll_deployer.models.report import DeployReport
from dll_deployer.objdump.runner import ObjdumpInspector
from dll_deployer.search.locator import LibraryLocator
from dll_deployer.search.paths import SearchPaths
from dll_deployer.system_libs import StaticSystemList, SystemDirProbe

__all__ = [
    "Classification",
    "DependencyClassifier",
    "DeployConfig",
    "DeployReport",
    "DllDeployer",
    "LibraryLocator",
    "ObjdumpInspector",
    "SearchPaths",
    "StaticSystemList",
    "SystemDirProbe",
]
