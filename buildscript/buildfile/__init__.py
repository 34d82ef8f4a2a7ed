from .base import BaseBuildfile
from .shell import ShellBuildfile
from .recording import Instruction, RecordingBuildfile

__all__ = ['BaseBuildfile', 'ShellBuildfile', 'Instruction', 'RecordingBuildfile']
