from dll_deployer.objdump.locator import resolve_objdump
from dll_deployer.objdump.runner import ObjdumpInspector

__all__ = ["ObjdumpInspector", "resolve_objdump"]
