"""Tests for the command line interface"""

from unittest import mock

import pytest
from click.testing import CliRunner

from app_deploy.api.exceptions import RemoteSyncError, TargetNotFoundError
from app_deploy.cli.main import cli
from app_deploy.constants import SyncMode, TransportPreference
from app_deploy.models import DeploymentRequest, DeployResult, SequenceOutcome


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def deployer_cls():
    with mock.patch("app_deploy.cli.commands.deploy.Deployer") as cls:
        deployer = cls.from_config.return_value

        def _deploy(request):
            return DeployResult(
                request=request,
                transport="remote",
                outcome=SequenceOutcome(published=True, synchronized=request.sync, installed=request.install),
            )

        deployer.deploy.side_effect = _deploy
        yield cls


def _request(deployer_cls) -> DeploymentRequest:
    return deployer_cls.from_config.return_value.deploy.call_args[0][0]


class TestDeployCommand:

    def test_success(self, runner, deployer_cls):
        result = runner.invoke(cli, ["deploy", "bcserver", "MyApp.app", "--sync", "--install"])

        assert result.exit_code == 0, result.output
        assert "Deploy Result" in result.output

        request = _request(deployer_cls)
        assert request.artifact_reference == "MyApp.app"
        assert request.target_host == "bcserver"
        assert request.sync and request.install
        assert request.transport == TransportPreference.REMOTE

    def test_options_are_mapped(self, runner, deployer_cls):
        result = runner.invoke(cli, [
            "deploy", "bcserver", "MyApp.app",
            "--use-dev-endpoint",
            "--sync-mode", "forcesync",
            "--scope", "Tenant",
            "--tenant", "t1",
            "--language", "da-DK",
            "--skip-verification",
        ])

        assert result.exit_code == 0, result.output
        request = _request(deployer_cls)
        assert request.transport == TransportPreference.DIRECT_HTTP
        assert request.sync_mode == SyncMode.FORCE_SYNC
        assert request.is_tenant_scoped
        assert request.tenant == "t1"
        assert request.install_language == "da-DK"
        assert request.skip_verification

    def test_config_path_is_passed_on(self, runner, deployer_cls, tmp_path):
        config = tmp_path / "deploy.yaml"
        config.write_text("targets: {}\n")

        runner.invoke(cli, ["--config", str(config), "deploy", "bcserver", "MyApp.app"])

        assert deployer_cls.from_config.call_args[0][0] == config

    def test_invalid_sync_mode(self, runner, deployer_cls):
        result = runner.invoke(cli, ["deploy", "bcserver", "MyApp.app", "--sync-mode", "Merge"])

        assert result.exit_code == 2
        deployer_cls.from_config.assert_not_called()

    def test_stage_failure_exits_non_zero(self, runner, deployer_cls):
        deployer = deployer_cls.from_config.return_value
        deployer.deploy.side_effect = RemoteSyncError("Destructive changes", outcome=SequenceOutcome(published=True))

        result = runner.invoke(cli, ["deploy", "bcserver", "MyApp.app", "--sync"])

        assert result.exit_code == 1
        assert "Destructive" in result.output
        assert "Published before the failure" in result.output

    def test_unknown_target_exits_non_zero(self, runner, deployer_cls):
        deployer_cls.from_config.side_effect = TargetNotFoundError("nope")

        result = runner.invoke(cli, ["deploy", "nope", "MyApp.app"])

        assert result.exit_code == 1
        assert "nope" in result.output


class TestTargetsCommand:

    def test_lists_targets(self, runner, tmp_path):
        config = tmp_path / "deploy.yaml"
        config.write_text(
            "targets:\n"
            "  bcserver:\n"
            "    credential_mode: Windows\n"
        )

        result = runner.invoke(cli, ["--config", str(config), "targets"])

        assert result.exit_code == 0, result.output
        assert "bcserver" in result.output
        assert "Windows" in result.output

    def test_empty_configuration(self, runner, tmp_path):
        config = tmp_path / "deploy.yaml"
        config.write_text("targets: {}\n")

        result = runner.invoke(cli, ["--config", str(config), "targets"])

        assert result.exit_code == 0
        assert "No targets configured" in result.output

    def test_missing_configuration(self, runner, tmp_path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "missing.yaml"), "targets"])

        assert result.exit_code == 1
        assert "not found" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output
