"""
Build manifest model.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..extensions.base import Deployable, Publishable, Notifiable


@dataclass(frozen=True)
class Manifest:
    """Configuration details for building, testing and deploying code"""
    # Container image the build runs in
    image: str = ""

    # User-defined label for the build
    name: str = ""

    # Build and test commands, run in order
    script: Tuple[str, ...] = ()

    # KEY=VALUE entries exported before the script runs
    env: Tuple[str, ...] = ()

    # Services (databases, queues) linked to the build environment
    services: Tuple[str, ...] = ()

    deploy: Optional['Deployable'] = None
    publish: Optional['Publishable'] = None
    notifications: Optional['Notifiable'] = None

    @property
    def has_deploy(self) -> bool:
        return self.deploy is not None

    @property
    def has_publish(self) -> bool:
        return self.publish is not None

    @property
    def has_notifications(self) -> bool:
        return self.notifications is not None
