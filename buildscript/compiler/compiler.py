import logging
from typing import Optional, Tuple, Union

from ..buildfile.base import BaseBuildfile
from ..buildfile.shell import ShellBuildfile
from ..core.enums import ExecutionMode
from ..core.exceptions import ExtensionError
from ..core.models import Manifest

logger = logging.getLogger(__name__)


def split_env(entry: str) -> Optional[Tuple[str, str]]:
    """
    Split a ``KEY=VALUE`` entry on its first ``=``.

    Returns:
        (key, value), or None if there is no ``=`` or the key is empty.
        The value may be empty and may itself contain ``=``.
    """
    key, sep, value = entry.partition("=")
    if not sep or not key:
        return None
    return key, value


class BuildCompiler:
    """
    Compiles a Manifest into an ordered instruction stream.

    Phases run in a fixed order: environment, commands, then (full mode
    only) publish and deploy. Build-only mode is used for changes that
    must not trigger side effects, such as pull requests.
    """

    def __init__(self, default_mode: Union[str, ExecutionMode] = ExecutionMode.FULL):
        self.default_mode = ExecutionMode.coerce(default_mode)

    def compile(
        self,
        manifest: Manifest,
        buildfile: BaseBuildfile,
        mode: Union[str, ExecutionMode, None] = None,
    ) -> None:
        mode = self.default_mode if mode is None else ExecutionMode.coerce(mode)
        logger.debug(f"Compiling build '{manifest.name or manifest.image}' in {mode.value} mode")

        self.write_build(manifest, buildfile)
        if mode is ExecutionMode.BUILD_ONLY:
            return

        if manifest.publish is not None:
            self._write_extension("publish", manifest.publish, buildfile)

        if manifest.deploy is not None:
            self._write_extension("deploy", manifest.deploy, buildfile)

    def write_build(self, manifest: Manifest, buildfile: BaseBuildfile) -> None:
        """Write only the environment and command phases"""
        for entry in manifest.env:
            pair = split_env(entry)
            if pair is None:
                logger.debug(f"Skipping malformed env entry: {entry!r}")
                continue
            buildfile.write_env(*pair)

        for command in manifest.script:
            buildfile.write_cmd(command)

    @staticmethod
    def _write_extension(phase: str, extension, buildfile: BaseBuildfile) -> None:
        try:
            extension.write(buildfile)
        except Exception as e:
            logger.error(f"{phase} phase failed: {e}", exc_info=True)
            raise ExtensionError(phase, e) from e


def compile_manifest(
    manifest: Manifest,
    buildfile: BaseBuildfile,
    mode: Union[str, ExecutionMode] = ExecutionMode.FULL,
) -> None:
    BuildCompiler().compile(manifest, buildfile, mode)


def compile_to_script(
    manifest: Manifest,
    mode: Union[str, ExecutionMode] = ExecutionMode.FULL,
    shell: str = "/bin/bash",
    echo_commands: bool = True,
    exit_on_error: bool = True,
) -> str:
    """Compile a manifest straight to a bash script"""
    buildfile = ShellBuildfile(shell=shell, echo_commands=echo_commands, exit_on_error=exit_on_error)
    BuildCompiler().compile(manifest, buildfile, mode)
    return buildfile.render()
