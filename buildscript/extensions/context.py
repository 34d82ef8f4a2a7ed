from dataclasses import dataclass
from typing import Union

from ..core.enums import BuildStatus
from .base import RunContext


def humanize_duration(seconds: int) -> str:
    """Format a duration the way it reads in a notification, e.g. ``2 minutes 5 seconds``"""
    seconds = max(int(seconds), 0)
    if seconds == 0:
        return "0 seconds"

    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    parts = []
    for amount, unit in ((hours, "hour"), (minutes, "minute"), (secs, "second")):
        if amount:
            parts.append(f"{amount} {unit}" + ("s" if amount != 1 else ""))
    return " ".join(parts)


@dataclass(frozen=True)
class BuildRunContext(RunContext):
    """Run context value an executor can build after a run"""
    host: str = ""
    owner: str = ""
    name: str = ""
    branch: str = ""
    hash: str = ""
    status: Union[str, BuildStatus] = BuildStatus.PENDING.value
    message: str = ""
    author: str = ""
    gravatar: str = ""
    duration: int = 0

    def __post_init__(self):
        if isinstance(self.status, BuildStatus):
            object.__setattr__(self, "status", self.status.value)

    @property
    def human_duration(self) -> str:
        return humanize_duration(self.duration)
