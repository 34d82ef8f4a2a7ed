"""
Extension points for the publish, deploy and notify phases.
"""

from .base import (
    ConfigurableExtension,
    Publishable,
    Deployable,
    Notifiable,
    RunContext,
    dispatch_notifications,
)
from .context import BuildRunContext, humanize_duration
from .composite import CompositePublish, CompositeDeploy, CompositeNotification
from .registry import ExtensionRegistry, get_default_registry, PUBLISH, DEPLOY, NOTIFY

__all__ = [
    'ConfigurableExtension',
    'Publishable',
    'Deployable',
    'Notifiable',
    'RunContext',
    'dispatch_notifications',
    'BuildRunContext',
    'humanize_duration',
    'CompositePublish',
    'CompositeDeploy',
    'CompositeNotification',
    'ExtensionRegistry',
    'get_default_registry',
    'PUBLISH',
    'DEPLOY',
    'NOTIFY',
]
