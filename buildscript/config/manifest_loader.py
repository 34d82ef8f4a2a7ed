import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..core.exceptions import ManifestParseError, ManifestReadError
from ..core.models import Manifest
from ..extensions.registry import DEPLOY, NOTIFY, PUBLISH, ExtensionRegistry, get_default_registry

logger = logging.getLogger(__name__)

_LIST_FIELDS = ('script', 'env', 'services')
_SCALAR_FIELDS = ('image', 'name')
# manifest key -> Manifest field
_SECTIONS = {
    PUBLISH: 'publish',
    DEPLOY: 'deploy',
    NOTIFY: 'notifications',
}


_NULL_TAG = 'tag:yaml.org,2002:null'
_RAW_FIELDS = _SCALAR_FIELDS + _LIST_FIELDS


def _raw_value(node: yaml.Node, loader: yaml.SafeLoader) -> Any:
    # source text, so "1.10" stays "1.10"
    if isinstance(node, yaml.ScalarNode):
        return None if node.tag == _NULL_TAG else node.value
    if isinstance(node, yaml.SequenceNode):
        return [_raw_value(item, loader) for item in node.value]
    return loader.construct_document(node)


def _decode(root: Optional[yaml.Node]) -> Any:
    """
    Turn a composed manifest into a dict. Core fields keep raw scalar
    text; extension sections are constructed as regular YAML values.
    """
    if root is None:
        return None

    loader = yaml.SafeLoader("")
    try:
        if not isinstance(root, yaml.MappingNode):
            return loader.construct_document(root)

        loader.flatten_mapping(root)
        document = {}
        for key_node, value_node in root.value:
            key = loader.construct_document(key_node)
            if isinstance(key, str) and key in _RAW_FIELDS:
                document[key] = _raw_value(value_node, loader)
            else:
                document[key] = loader.construct_document(value_node)
        return document
    finally:
        loader.dispose()


def _to_str(value: Any) -> str:
    # a bare "-" is a null item; decoded YAML booleans keep their lowercase spelling
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ManifestLoader:
    """Load YAML build manifests into Manifest objects"""

    def __init__(self, registry: Optional[ExtensionRegistry] = None):
        self.registry = registry or get_default_registry()

    def load_from_yaml(self, file_path: Union[str, Path]) -> Manifest:
        """Load a manifest from a YAML file"""
        try:
            with open(file_path, 'rb') as file:
                data = file.read()
        except OSError as e:
            raise ManifestReadError("cannot read manifest", source=str(file_path), cause=e) from e

        return self.load_from_bytes(data, source=str(file_path))

    def load_from_bytes(self, data: Union[bytes, str], source: Optional[str] = None) -> Manifest:
        """Load a manifest from raw YAML content"""
        try:
            config_dict = _decode(yaml.compose(data, Loader=yaml.SafeLoader))
        except yaml.YAMLError as e:
            raise ManifestParseError("invalid YAML", source=source, cause=e) from e

        if config_dict is None:
            logger.debug(f"Empty manifest{f' in {source}' if source else ''}")
            config_dict = {}

        return self.load_from_dict(config_dict, source=source)

    def load_from_dict(self, config_dict: Dict[str, Any], source: Optional[str] = None) -> Manifest:
        """Build a Manifest from an already decoded document. Unknown keys are ignored."""
        if not isinstance(config_dict, dict):
            raise ManifestParseError(
                f"manifest must be a mapping, got {type(config_dict).__name__}", source=source
            )

        fields: Dict[str, Any] = {}
        for key in _SCALAR_FIELDS:
            fields[key] = self._scalar(config_dict.get(key), key, source)
        for key in _LIST_FIELDS:
            fields[key] = self._string_list(config_dict.get(key), key, source)

        for key, field_name in _SECTIONS.items():
            try:
                fields[field_name] = self.registry.build(key, config_dict.get(key))
            except Exception as e:
                raise ManifestParseError(f"invalid '{key}' section", source=source, cause=e) from e

        manifest = Manifest(**fields)
        logger.debug(
            f"Loaded manifest image={manifest.image!r} commands={len(manifest.script)} "
            f"env={len(manifest.env)} services={len(manifest.services)}"
        )
        return manifest

    @staticmethod
    def _scalar(value: Any, key: str, source: Optional[str]) -> str:
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            raise ManifestParseError(f"'{key}' must be a scalar, got {type(value).__name__}", source=source)
        return _to_str(value)

    @staticmethod
    def _string_list(value: Any, key: str, source: Optional[str]) -> Tuple[str, ...]:
        if value is None:
            return ()
        if not isinstance(value, list):
            raise ManifestParseError(f"'{key}' must be a list, got {type(value).__name__}", source=source)

        items = []
        for idx, item in enumerate(value):
            if isinstance(item, (dict, list)):
                raise ManifestParseError(
                    f"'{key}[{idx}]' must be a scalar, got {type(item).__name__}", source=source
                )
            items.append(_to_str(item))
        return tuple(items)


def parse_manifest(data: Union[bytes, str], registry: Optional[ExtensionRegistry] = None) -> Manifest:
    """Parse raw YAML into a Manifest, raising ManifestParseError on malformed input"""
    return ManifestLoader(registry).load_from_bytes(data)


def parse_manifest_file(file_path: Union[str, Path], registry: Optional[ExtensionRegistry] = None) -> Manifest:
    """Read and parse a manifest file; unreadable files raise ManifestReadError"""
    return ManifestLoader(registry).load_from_yaml(file_path)
