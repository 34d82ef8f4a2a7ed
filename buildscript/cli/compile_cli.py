#!/usr/bin/env python3
"""
CLI tool for compiling build manifests into shell scripts
"""

import click
import logging
import sys
import yaml
from pathlib import Path
from typing import Optional

from ..buildfile.shell import ShellBuildfile
from ..compiler.compiler import BuildCompiler
from ..config.global_config_loader import GlobalConfig, load_global_config
from ..config.manifest_loader import ManifestLoader
from ..core.enums import ExecutionMode
from ..core.exceptions import ExtensionError, ExtensionRegistryError, ManifestError
from ..extensions.registry import ExtensionRegistry, get_default_registry


class CompileCLI:
    """Command-line interface for manifest compilation"""

    def __init__(self, global_config: GlobalConfig, registry: Optional[ExtensionRegistry] = None):
        self.global_config = global_config
        self.registry = registry or get_default_registry()
        self.registry.register_from_config(global_config.extensions.to_dict())
        self.loader = ManifestLoader(self.registry)
        self.compiler = BuildCompiler(default_mode=global_config.compiler.default_mode)
        self.logger = logging.getLogger(__name__)

    def compile_manifest(self, manifest_path: str, build_only: bool = False,
                         output_path: Optional[str] = None) -> int:
        """Compile a manifest and write the script to a file or stdout"""
        try:
            manifest = self.loader.load_from_yaml(manifest_path)
        except ManifestError as e:
            click.echo(f"Error loading manifest: {e}", err=True)
            return 1

        settings = self.global_config.buildfile
        buildfile = ShellBuildfile(
            shell=settings.shell,
            echo_commands=settings.echo_commands,
            exit_on_error=settings.exit_on_error
        )
        mode = ExecutionMode.BUILD_ONLY if build_only else None

        try:
            self.compiler.compile(manifest, buildfile, mode)
        except ExtensionError as e:
            click.echo(f"Error compiling manifest: {e}", err=True)
            return 1

        script = buildfile.render()
        if output_path:
            try:
                Path(output_path).write_text(script)
            except OSError as e:
                click.echo(f"Error writing build script: {e}", err=True)
                return 1
            self.logger.info(f"Wrote build script for {manifest_path} to {output_path}")
        else:
            click.echo(script, nl=False)
        return 0

    def show_manifest(self, manifest_path: str) -> int:
        """Print a summary of a manifest"""
        try:
            manifest = self.loader.load_from_yaml(manifest_path)
        except ManifestError as e:
            click.echo(f"Error loading manifest: {e}", err=True)
            return 1

        click.echo(f"Name: {manifest.name or '-'}")
        click.echo(f"Image: {manifest.image or '-'}")
        click.echo(f"Commands: {len(manifest.script)}")
        click.echo(f"Env: {len(manifest.env)}")
        if manifest.services:
            click.echo("Services:")
            for service in manifest.services:
                click.echo(f"  - {service}")
        click.echo(f"Publish: {'yes' if manifest.has_publish else 'no'}")
        click.echo(f"Deploy: {'yes' if manifest.has_deploy else 'no'}")
        click.echo(f"Notify: {'yes' if manifest.has_notifications else 'no'}")
        return 0


@click.group()
@click.option('--global-config', default=None, help='Path to global config YAML')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
              help='Set the logging level (overrides global config)')
@click.pass_context
def cli(ctx, global_config, log_level):
    """Build script compiler"""
    try:
        global_cfg = load_global_config(global_config)
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid global config: {e}")

    # Logs go to stderr so that a compiled script on stdout stays clean
    logging.basicConfig(
        level=getattr(logging, (log_level or global_cfg.logging.level).upper()),
        format=global_cfg.logging.format,
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        cli_instance = CompileCLI(global_cfg)
    except ExtensionRegistryError as e:
        raise click.ClickException(str(e))

    ctx.ensure_object(dict)
    ctx.obj['global_config'] = global_cfg
    ctx.obj['cli'] = cli_instance


@cli.command(name='compile')
@click.argument('manifest_path')
@click.option('--build-only', is_flag=True, help='Skip publish and deploy phases')
@click.option('--output', '-o', help='Write the script to this file instead of stdout')
@click.pass_context
def compile_command(ctx, manifest_path, build_only, output):
    """Compile a manifest into a shell script"""
    cli_instance = ctx.obj['cli']
    return_code = cli_instance.compile_manifest(manifest_path, build_only, output)
    sys.exit(return_code or 0)


@cli.command()
@click.argument('manifest_path')
@click.pass_context
def show(ctx, manifest_path):
    """Show a manifest summary"""
    cli_instance = ctx.obj['cli']
    return_code = cli_instance.show_manifest(manifest_path)
    sys.exit(return_code or 0)


if __name__ == "__main__":
    cli()
