"""Custom exceptions for dll-deployer.

Every exception carries the process exit status the CLI terminates with.
"""


class DeployerError(Exception):
    """Base exception for all deployer errors."""

    exit_code: int = 1


class ToolInvocationError(DeployerError):
    """Raised when objdump cannot be spawned or exits non-zero."""

    exit_code = 1

    def __init__(self, command: list[str], returncode: int | None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            msg = f"Failed to run {' '.join(command)}: {stderr}"
        else:
            msg = f"{' '.join(command)} failed with exit code {returncode}"
            if stderr:
                msg += f"\nThe std error is: {stderr}"
        super().__init__(msg)


class ToolNotFoundError(DeployerError):
    """Raised when objdump cannot be located with the selected strategy."""

    def __init__(self, message: str, exit_code: int):
        self.exit_code = exit_code
        super().__init__(message)


class TargetNotFoundError(DeployerError):
    """Raised when the binary to deploy for is not a regular file."""

    exit_code = 5


class UnresolvedDependencyError(DeployerError):
    """Raised when a required dll cannot be found and missing dlls are not allowed."""

    exit_code = 7

    def __init__(self, name: str, required_by: str):
        self.name = name
        self.required_by = required_by
        super().__init__(f'Failed to find dll "{name}", required by "{required_by}"')


class ParseError(DeployerError):
    """Raised when objdump output does not match the expected format."""

    exit_code = 8


class CopyError(DeployerError):
    """Raised when a located dll cannot be copied into the target directory."""

    exit_code = 9

    def __init__(self, source: str, destination: str, reason: str):
        self.source = source
        self.destination = destination
        super().__init__(f'Failed to copy "{source}" to "{destination}": {reason}')
