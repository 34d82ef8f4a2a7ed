from .enums import ExecutionMode, BuildStatus
from .exceptions import (
    ManifestError,
    ManifestParseError,
    ManifestReadError,
    ExtensionError,
    ExtensionRegistryError,
)
from .models import Manifest

__all__ = [
    'ExecutionMode',
    'BuildStatus',
    'ManifestError',
    'ManifestParseError',
    'ManifestReadError',
    'ExtensionError',
    'ExtensionRegistryError',
    'Manifest',
]
