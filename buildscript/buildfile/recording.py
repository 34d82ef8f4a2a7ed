from typing import List, NamedTuple, Optional

from .base import BaseBuildfile


class Instruction(NamedTuple):
    kind: str  # "env" | "cmd"
    key: Optional[str] = None
    value: Optional[str] = None
    command: Optional[str] = None

    @classmethod
    def env(cls, key: str, value: str) -> 'Instruction':
        return cls(kind="env", key=key, value=value)

    @classmethod
    def cmd(cls, command: str) -> 'Instruction':
        return cls(kind="cmd", command=command)


class RecordingBuildfile(BaseBuildfile):
    """Buildfile that keeps the instruction stream in memory, for dry runs and comparisons"""

    def __init__(self):
        self.instructions: List[Instruction] = []

    def write_env(self, key: str, value: str) -> None:
        self.instructions.append(Instruction.env(key, value))

    def write_cmd(self, command: str) -> None:
        self.instructions.append(Instruction.cmd(command))

    @property
    def commands(self) -> List[str]:
        return [i.command for i in self.instructions if i.kind == "cmd"]

    @property
    def env(self) -> List[tuple]:
        return [(i.key, i.value) for i in self.instructions if i.kind == "env"]

    def __len__(self) -> int:
        return len(self.instructions)
