from dll_deployer.models.config import DeployConfig

__all__ = ["DeployConfig"]
