import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from ..core.exceptions import ExtensionRegistryError
from .base import Deployable, Notifiable, Publishable
from .composite import CompositeDeploy, CompositeNotification, CompositePublish

logger = logging.getLogger(__name__)

PUBLISH = "publish"
DEPLOY = "deploy"
NOTIFY = "notify"

# manifest section -> (capability, wrapper for the section)
_KINDS = {
    PUBLISH: (Publishable, CompositePublish),
    DEPLOY: (Deployable, CompositeDeploy),
    NOTIFY: (Notifiable, CompositeNotification),
}


def import_class(class_path: str) -> type:
    """Import ``package.module.ClassName``"""
    if "." not in class_path:
        raise ExtensionRegistryError(f"Invalid class path: {class_path!r}")
    module_path, class_name = class_path.rsplit('.', 1)
    try:
        module = __import__(module_path, fromlist=[class_name])
        return getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        raise ExtensionRegistryError(f"Cannot import {class_path}: {e}") from e


class ExtensionRegistry:
    """
    Maps the keys under a manifest's ``publish``, ``deploy`` and ``notify``
    sections to backend classes.

    Registration happens at start-up; afterwards the registry is only read.
    """

    def __init__(self):
        self._backends: Dict[str, Dict[str, type]] = {kind: {} for kind in _KINDS}

    @staticmethod
    def _check_kind(kind: str) -> None:
        if kind not in _KINDS:
            raise ExtensionRegistryError(
                f"Unknown extension kind: {kind}. Supported: {', '.join(_KINDS)}"
            )

    def register(self, kind: str, key: str, backend_class: Type) -> None:
        """
        Register a backend class under a section key.

        Args:
            kind: 'publish', 'deploy' or 'notify'
            key: Key the backend is configured under in the manifest
            backend_class: Class implementing the capability for ``kind``
        """
        self._check_kind(kind)
        capability = _KINDS[kind][0]
        if not (isinstance(backend_class, type) and issubclass(backend_class, capability)):
            raise ExtensionRegistryError(
                f"{backend_class!r} registered for {kind}.{key} does not implement {capability.__name__}"
            )
        if key in self._backends[kind]:
            logger.warning(f"Replacing {kind} backend '{key}'")
        self._backends[kind][key] = backend_class
        logger.debug(f"Registered {kind} backend '{key}': {backend_class.__name__}")

    def register_path(self, kind: str, key: str, class_path: str) -> None:
        self.register(kind, key, import_class(class_path))

    def register_from_config(self, extensions: Mapping[str, Mapping[str, str]]) -> None:
        """Register backends from a ``{kind: {key: class_path}}`` mapping"""
        for kind, backends in extensions.items():
            for key, class_path in (backends or {}).items():
                self.register_path(kind, key, class_path)

    def unregister(self, kind: str, key: str) -> None:
        self._check_kind(kind)
        self._backends[kind].pop(key, None)

    def get(self, kind: str, key: str) -> Optional[type]:
        self._check_kind(kind)
        return self._backends[kind].get(key)

    def keys(self, kind: str) -> List[str]:
        self._check_kind(kind)
        return list(self._backends[kind])

    def build(self, kind: str, section: Optional[Mapping[str, Any]]):
        """
        Turn a manifest section into one capability object.

        Keys without a registered backend are skipped. An empty section
        still yields a (no-op) wrapper so that "present but empty" and
        "absent" stay distinct.

        Returns:
            Composite capability, or None when the section is absent
        """
        self._check_kind(kind)
        if section is None:
            return None
        if not isinstance(section, Mapping):
            raise ValueError(f"'{kind}' must be a mapping of backend settings, got {type(section).__name__}")

        members = []
        for key, settings in section.items():
            backend_class = self._backends[kind].get(key)
            if backend_class is None:
                logger.warning(f"No {kind} backend registered for '{key}', ignoring it")
                continue
            if settings is None:
                settings = {}
            if not isinstance(settings, Mapping):
                raise ValueError(f"'{kind}.{key}' must be a mapping, got {type(settings).__name__}")
            members.append((key, backend_class.from_config(dict(settings))))

        return _KINDS[kind][1](members)


_default_registry: Optional[ExtensionRegistry] = None


def get_default_registry() -> ExtensionRegistry:
    """Process-wide registry used when a loader is not given one"""
    global _default_registry
    if _default_registry is None:
        _default_registry = ExtensionRegistry()
    return _default_registry
