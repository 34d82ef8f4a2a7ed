"""
Capabilities that publish, deploy and notification backends implement.

The compiler only ever holds references to these interfaces. Concrete
backends live outside this package and are wired in through
:class:`~buildscript.extensions.registry.ExtensionRegistry`.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, TYPE_CHECKING

from ..core.exceptions import ExtensionError

if TYPE_CHECKING:
    from ..buildfile.base import BaseBuildfile
    from ..core.models import Manifest

logger = logging.getLogger(__name__)


class ConfigurableExtension:
    """Mixin for backends built from their manifest section settings"""

    @classmethod
    def from_config(cls, settings: Dict[str, Any]):
        """
        Create a backend from the settings found under its key.

        Args:
            settings: Mapping taken verbatim from the manifest (may be empty)

        Returns:
            Backend instance
        """
        return cls(**settings)


class Publishable(ConfigurableExtension, ABC):
    """Publish phase: appends its own instructions to the buildfile"""

    @abstractmethod
    def write(self, buildfile: 'BaseBuildfile') -> None:
        """
        Append publish instructions.

        Only write_env and write_cmd are guaranteed. Helpers such as
        ShellBuildfile.write_comment or write_host must be feature-checked
        (``getattr(buildfile, "write_comment", None)``) since the compiler
        may hand over any BaseBuildfile.
        """


class Deployable(ConfigurableExtension, ABC):
    """
    Deploy phase. Same shape as Publishable, but always compiled after
    the publish phase.
    """

    @abstractmethod
    def write(self, buildfile: 'BaseBuildfile') -> None:
        """Append deploy instructions; same buildfile rules as Publishable.write"""


class Notifiable(ConfigurableExtension, ABC):
    """Consumes a run context once a build has executed. Never touches the buildfile."""

    @abstractmethod
    def set(self, context: 'RunContext') -> None:
        pass


class RunContext(ABC):
    """Read-only metadata about one build run, supplied by the executor"""

    @property
    @abstractmethod
    def host(self) -> str: ...

    @property
    @abstractmethod
    def owner(self) -> str: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def branch(self) -> str: ...

    @property
    @abstractmethod
    def hash(self) -> str: ...

    @property
    @abstractmethod
    def status(self) -> str: ...

    @property
    @abstractmethod
    def message(self) -> str: ...

    @property
    @abstractmethod
    def author(self) -> str: ...

    @property
    @abstractmethod
    def gravatar(self) -> str: ...

    @property
    @abstractmethod
    def duration(self) -> int:
        """Run duration in seconds"""

    @property
    @abstractmethod
    def human_duration(self) -> str: ...


def dispatch_notifications(manifest: 'Manifest', context: RunContext) -> bool:
    """
    Hand the run context to the manifest's notification backends.

    Called by the executor after a run; compilation never notifies.

    Returns:
        True if a notification section was present
    """
    if manifest.notifications is None:
        return False

    logger.info(f"Dispatching notifications for {context.owner}/{context.name} ({context.status})")
    try:
        manifest.notifications.set(context)
    except Exception as e:
        logger.error(f"Notification failed: {e}", exc_info=True)
        raise ExtensionError("notify", e) from e
    return True
