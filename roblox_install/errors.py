"""Error types — everything that can go wrong while locating Roblox Studio."""

from __future__ import annotations


class RobloxInstallError(Exception):
    """Base class for all installation-resolution failures."""

    message = "Roblox Studio installation could not be resolved"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class DocumentsDirectoryNotFound(RobloxInstallError):
    message = "Couldn't find Documents directory"


class MalformedRegistry(RobloxInstallError):
    message = (
        "The values of the registry keys used to find Roblox are malformed, "
        "maybe your Roblox installation is corrupt?"
    )


class PlatformNotSupported(RobloxInstallError):
    message = "Your platform is not currently supported"


class PluginsDirectoryNotFound(RobloxInstallError):
    message = "Couldn't find Plugins directory"


class RegistryError(RobloxInstallError):
    """Registry key or value could not be read. Wraps the underlying OSError."""

    message = "Couldn't find registry keys, Roblox might not be installed."

    def __init__(self, cause: OSError) -> None:
        super().__init__()
        self.cause = cause
        self.__cause__ = cause


class EnvironmentVariableError(RobloxInstallError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Environment variable misconfigured: {detail}")
        self.detail = detail


class NotInstalled(RobloxInstallError):
    message = "Couldn't find Roblox Studio"


class WSLDetectionError(PlatformNotSupported):
    """A WSL probe command failed or produced unusable output."""

    message = "Failed to detect WSL environment"
