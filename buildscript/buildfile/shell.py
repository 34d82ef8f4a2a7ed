"""
Bash rendering of a compiled build.
"""
import shlex
from typing import List

from .base import BaseBuildfile


class ShellBuildfile(BaseBuildfile):
    """
    Buildfile that renders instructions as a bash script.

    Environment values are written unquoted so that references such as
    ``$HOME`` or ``$GOPATH/bin`` expand inside the build container.
    """

    def __init__(self, shell: str = "/bin/bash", echo_commands: bool = True, exit_on_error: bool = True):
        self.shell = shell
        self.echo_commands = echo_commands
        self.exit_on_error = exit_on_error
        self._lines: List[str] = []

    def write_env(self, key: str, value: str) -> None:
        self._lines.append(f"export {key}={value}")

    def write_cmd(self, command: str) -> None:
        if self.echo_commands:
            self._lines.append(f"echo {shlex.quote('$ ' + command)}")
        self._lines.append(command)

    def write_cmd_silent(self, command: str) -> None:
        """Write a command without echoing it to the build output"""
        self._lines.append(command)

    def write_comment(self, comment: str) -> None:
        for line in comment.splitlines() or [""]:
            self._lines.append(f"# {line}".rstrip())

    def write_host(self, mapping: str) -> None:
        """Append an entry to /etc/hosts, e.g. ``127.0.0.1 database``"""
        self._lines.append(f"echo {shlex.quote(mapping)} >> /etc/hosts")

    def header(self) -> List[str]:
        lines = [f"#!{self.shell}"]
        lines.append("set -e" if self.exit_on_error else "set +e")
        return lines

    def render(self, header: bool = True) -> str:
        lines = (self.header() if header else []) + self._lines
        return "\n".join(lines) + "\n"

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def __str__(self) -> str:
        return self.render()
