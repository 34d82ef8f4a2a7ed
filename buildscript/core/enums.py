from enum import Enum


class ExecutionMode(str, Enum):
    """Which phases of the build script get compiled"""
    FULL = "full"
    BUILD_ONLY = "build_only"

    @classmethod
    def coerce(cls, value) -> 'ExecutionMode':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unsupported execution mode: {value!r}. Supported: {allowed}")


class BuildStatus(str, Enum):
    PENDING = "pending"
    STARTED = "started"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"
    KILLED = "killed"
