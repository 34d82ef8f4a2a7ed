"""Pytest configuration and fixtures for buildscript tests."""

import sys
import logging
from pathlib import Path
from typing import List, Optional

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from buildscript.buildfile.recording import RecordingBuildfile
from buildscript.extensions.base import Deployable, Notifiable, Publishable
from buildscript.extensions.registry import ExtensionRegistry

# Configure logging
logging.basicConfig(level=logging.INFO)


class EchoPublish(Publishable):
    """Publishes by echoing the target; stands in for a registry push"""

    def __init__(self, target: str = "registry", commands: Optional[List[str]] = None):
        self.target = target
        self.commands = commands if commands is not None else [f"publish {target}"]

    def write(self, buildfile) -> None:
        for command in self.commands:
            buildfile.write_cmd(command)


class EchoDeploy(Deployable):
    def __init__(self, target: str = "production", commands: Optional[List[str]] = None):
        self.target = target
        self.commands = commands if commands is not None else [f"deploy {target}"]

    def write(self, buildfile) -> None:
        buildfile.write_env("DEPLOY_TARGET", self.target)
        for command in self.commands:
            buildfile.write_cmd(command)


class CollectingNotify(Notifiable):
    def __init__(self, channel: str = "#builds"):
        self.channel = channel
        self.received = []

    def set(self, context) -> None:
        self.received.append(context)


@pytest.fixture
def backends():
    """Backend classes used by the registry fixture."""
    return {
        'publish': EchoPublish,
        'deploy': EchoDeploy,
        'notify': CollectingNotify,
    }


@pytest.fixture
def registry(backends) -> ExtensionRegistry:
    """Registry with one fake backend per section."""
    registry = ExtensionRegistry()
    registry.register('publish', 'registry', backends['publish'])
    registry.register('deploy', 'server', backends['deploy'])
    registry.register('notify', 'webhook', backends['notify'])
    return registry


@pytest.fixture
def buildfile() -> RecordingBuildfile:
    return RecordingBuildfile()


@pytest.fixture
def full_manifest_yaml() -> str:
    """Manifest using every top-level key, with deploy written before publish."""
    return """
image: golang:1.21
name: api
env:
  - GOPATH=/var/cache/go
  - GOFLAGS=-mod=vendor
script:
  - go build ./...
  - go test ./...
services:
  - postgres
  - redis
deploy:
  server:
    target: staging
publish:
  registry:
    target: docker.io/acme/api
notify:
  webhook:
    channel: "#ci"
"""
