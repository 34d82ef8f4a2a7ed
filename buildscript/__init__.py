"""
buildscript - compiles YAML build manifests into ordered build scripts

Main modules:
- core: Manifest model, enums and exceptions
- config: Manifest parsing and global configuration
- buildfile: Instruction sinks (shell script, in-memory)
- extensions: Publish/deploy/notify capabilities and backend registry
- compiler: Manifest -> buildfile compilation
"""

from .core.enums import ExecutionMode
from .core.exceptions import ManifestError, ManifestParseError, ManifestReadError, ExtensionError
from .core.models import Manifest
from .config.manifest_loader import ManifestLoader, parse_manifest, parse_manifest_file
from .buildfile import BaseBuildfile, ShellBuildfile, RecordingBuildfile
from .extensions import Publishable, Deployable, Notifiable, RunContext, dispatch_notifications
from .compiler import BuildCompiler, compile_manifest, compile_to_script

__version__ = "1.0.0"
__all__ = [
    'ExecutionMode',
    'ManifestError',
    'ManifestParseError',
    'ManifestReadError',
    'ExtensionError',
    'Manifest',
    'ManifestLoader',
    'parse_manifest',
    'parse_manifest_file',
    'BaseBuildfile',
    'ShellBuildfile',
    'RecordingBuildfile',
    'Publishable',
    'Deployable',
    'Notifiable',
    'RunContext',
    'dispatch_notifications',
    'BuildCompiler',
    'compile_manifest',
    'compile_to_script',
]
