"""Test cases for the compile CLI."""

import pytest
from click.testing import CliRunner

from buildscript.cli import compile_cli
from buildscript.cli.compile_cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def cli_registry(registry, monkeypatch):
    """Route the CLI to the fixture registry instead of the process-wide one."""
    monkeypatch.setattr(compile_cli, "get_default_registry", lambda: registry)
    return registry


@pytest.fixture
def global_config_path(tmp_path):
    path = tmp_path / "buildscript.yaml"
    path.write_text("buildfile:\n  shell: /bin/bash\n")
    return str(path)


@pytest.fixture
def manifest_path(tmp_path, full_manifest_yaml):
    path = tmp_path / "build.yml"
    path.write_text(full_manifest_yaml)
    return str(path)


class TestCompileCommand:
    """Test suite for `buildscript compile`."""

    def test_full_compile_to_stdout(self, runner, global_config_path, manifest_path):
        result = runner.invoke(cli, ['--global-config', global_config_path, 'compile', manifest_path])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[:2] == ["#!/bin/bash", "set -e"]
        assert "export GOPATH=/var/cache/go" in lines
        assert lines.index("publish docker.io/acme/api") < lines.index("deploy staging")

    def test_build_only_skips_publish_and_deploy(self, runner, global_config_path, manifest_path):
        result = runner.invoke(
            cli, ['--global-config', global_config_path, 'compile', '--build-only', manifest_path]
        )

        assert result.exit_code == 0, result.output
        assert "go test ./..." in result.output
        assert "publish" not in result.output
        assert "deploy staging" not in result.output

    def test_output_file(self, runner, tmp_path, global_config_path, manifest_path):
        output = tmp_path / "build.sh"

        result = runner.invoke(
            cli, ['--global-config', global_config_path, 'compile', manifest_path, '--output', str(output)]
        )

        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("#!/bin/bash\n")
        assert "deploy staging" in output.read_text()

    def test_missing_manifest_exits_1(self, runner, tmp_path, global_config_path):
        output = tmp_path / "build.sh"

        result = runner.invoke(
            cli, ['--global-config', global_config_path, 'compile', str(tmp_path / "nope.yml"),
                  '--output', str(output)]
        )

        assert result.exit_code == 1
        assert "Error loading manifest" in result.output
        assert not output.exists()

    def test_malformed_manifest_exits_1(self, runner, tmp_path, global_config_path):
        path = tmp_path / "broken.yml"
        path.write_text("script: [echo hi\n")

        result = runner.invoke(cli, ['--global-config', global_config_path, 'compile', str(path)])

        assert result.exit_code == 1
        assert "invalid YAML" in result.output
        assert "#!/bin/bash" not in result.output

    def test_default_mode_from_global_config(self, runner, tmp_path, manifest_path):
        config = tmp_path / "build_only.yaml"
        config.write_text("compiler:\n  default_mode: build_only\n")

        result = runner.invoke(cli, ['--global-config', str(config), 'compile', manifest_path])

        assert result.exit_code == 0, result.output
        assert "deploy staging" not in result.output

    def test_unwritable_output_exits_1(self, runner, tmp_path, global_config_path, manifest_path):
        output = tmp_path / "missing_dir" / "build.sh"

        result = runner.invoke(
            cli, ['--global-config', global_config_path, 'compile', manifest_path, '--output', str(output)]
        )

        assert result.exit_code == 1
        assert "Error writing build script" in result.output
        assert not output.exists()

    @pytest.mark.parametrize("content", [
        "logging:\n  levle: DEBUG\n",
        "compiler: [full\n",
        "compiler:\n  default_mode: nightly\n",
    ])
    def test_invalid_global_config_fails_cleanly(self, runner, tmp_path, manifest_path, content):
        config = tmp_path / "broken.yaml"
        config.write_text(content)

        result = runner.invoke(cli, ['--global-config', str(config), 'compile', manifest_path])

        assert result.exit_code == 1
        assert "Invalid global config" in result.output
        assert not isinstance(result.exception, (TypeError, ValueError))

    def test_bad_extension_path_fails(self, runner, tmp_path, manifest_path):
        config = tmp_path / "bad.yaml"
        config.write_text("extensions:\n  publish:\n    s3: buildscript.no_such_module.S3\n")

        result = runner.invoke(cli, ['--global-config', str(config), 'compile', manifest_path])

        assert result.exit_code != 0
        assert "Cannot import buildscript.no_such_module.S3" in result.output


class TestShowCommand:
    """Test suite for `buildscript show`."""

    def test_show_summary(self, runner, global_config_path, manifest_path):
        result = runner.invoke(cli, ['--global-config', global_config_path, 'show', manifest_path])

        assert result.exit_code == 0, result.output
        assert "Name: api" in result.output
        assert "Image: golang:1.21" in result.output
        assert "Commands: 2" in result.output
        assert "  - postgres" in result.output
        assert "Publish: yes" in result.output
        assert "Notify: yes" in result.output

    def test_show_missing_file(self, runner, tmp_path, global_config_path):
        result = runner.invoke(cli, ['--global-config', global_config_path, 'show', str(tmp_path / "x.yml")])

        assert result.exit_code == 1
