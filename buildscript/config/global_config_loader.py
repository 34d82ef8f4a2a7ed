import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

from ..core.enums import ExecutionMode


@dataclass
class CompilerConfig:
    """Compiler configuration"""
    default_mode: str = ExecutionMode.FULL.value

    def __post_init__(self):
        # fail at load time rather than on the first compile
        self.default_mode = ExecutionMode.coerce(self.default_mode).value


@dataclass
class BuildfileConfig:
    """Shell script rendering configuration"""
    shell: str = "/bin/bash"
    echo_commands: bool = True
    exit_on_error: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ExtensionsConfig:
    """Backend class paths, keyed by the name used in manifests"""
    publish: Dict[str, str] = field(default_factory=dict)
    deploy: Dict[str, str] = field(default_factory=dict)
    notify: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            'publish': dict(self.publish),
            'deploy': dict(self.deploy),
            'notify': dict(self.notify),
        }


@dataclass
class GlobalConfig:
    """Global configuration for the compiler and CLI"""
    compiler: CompilerConfig
    buildfile: BuildfileConfig
    logging: LoggingConfig
    extensions: ExtensionsConfig

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GlobalConfig':
        """Create GlobalConfig from dictionary"""
        return cls(
            compiler=CompilerConfig(**(data.get('compiler') or {})),
            buildfile=BuildfileConfig(**(data.get('buildfile') or {})),
            logging=LoggingConfig(**(data.get('logging') or {})),
            extensions=ExtensionsConfig(**(data.get('extensions') or {}))
        )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'GlobalConfig':
        """Load GlobalConfig from YAML file"""
        path = Path(yaml_path)
        if not path.exists():
            # Return default config if file doesn't exist
            return cls.default()

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def default(cls) -> 'GlobalConfig':
        """Return default configuration"""
        return cls(
            compiler=CompilerConfig(),
            buildfile=BuildfileConfig(),
            logging=LoggingConfig(),
            extensions=ExtensionsConfig()
        )


# Global instance - can be overridden
_global_config: Optional[GlobalConfig] = None


def load_global_config(config_path: Optional[str] = None) -> GlobalConfig:
    """
    Load global configuration from YAML file.
    If no path provided, looks for buildscript.yaml in standard locations.
    """
    global _global_config

    if config_path:
        _global_config = GlobalConfig.from_yaml(config_path)
        return _global_config

    # Try standard locations
    search_paths = [
        Path("./buildscript.yaml"),
        Path("./config/buildscript.yaml"),
        Path("/etc/buildscript/buildscript.yaml"),
    ]

    for path in search_paths:
        if path.exists():
            _global_config = GlobalConfig.from_yaml(str(path))
            return _global_config

    # Return default if no config found
    _global_config = GlobalConfig.default()
    return _global_config


def get_global_config() -> GlobalConfig:
    """Get the loaded global configuration"""
    global _global_config
    if _global_config is None:
        _global_config = load_global_config()
    return _global_config
