from .manifest_loader import ManifestLoader, parse_manifest, parse_manifest_file
from .global_config_loader import GlobalConfig, load_global_config, get_global_config

__all__ = [
    'ManifestLoader',
    'parse_manifest',
    'parse_manifest_file',
    'GlobalConfig',
    'load_global_config',
    'get_global_config',
]
