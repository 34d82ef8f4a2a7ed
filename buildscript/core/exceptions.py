from typing import Optional


class ManifestError(Exception):
    """Base class for failures while loading a build manifest"""

    def __init__(self, message: str, source: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.cause = cause

    def __str__(self) -> str:
        text = self.message
        if self.source:
            text = f"{self.source}: {text}"
        if self.cause is not None:
            text = f"{text} ({self.cause})"
        return text


class ManifestParseError(ManifestError):
    """The manifest is not valid YAML or does not have the expected shape"""


class ManifestReadError(ManifestError):
    """The manifest file could not be read"""


class ExtensionError(Exception):
    """A publish, deploy or notify backend failed"""

    def __init__(self, phase: str, cause: BaseException):
        super().__init__(f"{phase} phase failed: {cause}")
        self.phase = phase
        self.cause = cause


class ExtensionRegistryError(Exception):
    """Invalid backend registration or lookup"""
