"""Tests for the remote execution transport"""

import asyncio

import pytest

from app_deploy.api.exceptions import RemotePublishError, RemoteSyncError, RemoteInstallError
from app_deploy.constants import PackageType, Scope, SyncMode
from app_deploy.host.channel import ChannelMetadataReader
from app_deploy.models import DeploymentRequest, InvocationResult, StagedArtifact
from app_deploy.transports.remote import RemoteExecutionTransport

from .conftest import StubChannel

STAGED = StagedArtifact(
    original_reference="MyApp.app",
    resolved_target_path="/run/my/apps/MyApp.app",
    was_copied=True,
    copied_into_target=True,
)


def _run(channel, **kwargs):
    transport = RemoteExecutionTransport(channel, ChannelMetadataReader(channel))
    request = DeploymentRequest("MyApp.app", "bcserver", **kwargs)
    return asyncio.run(transport.execute(request, STAGED))


class TestPublishStage:

    def test_publish_only(self, channel):
        outcome = _run(channel)

        assert channel.operations == ["publish_app"]
        publish = channel.call("publish_app")
        assert publish.args == ("/run/my/apps/MyApp.app", False, PackageType.EXTENSION)
        assert publish.options == ()
        assert outcome.published is True
        assert outcome.synchronized is False
        assert outcome.installed is False

    def test_scope_and_tenant_options(self, channel):
        _run(channel, scope=Scope.TENANT, tenant="t1", skip_verification=True, package_type="SymbolsOnly")

        publish = channel.call("publish_app")
        assert publish.args == ("/run/my/apps/MyApp.app", True, PackageType.SYMBOLS_ONLY)
        assert publish.options == (("scope", Scope.TENANT), ("tenant", "t1"))

    def test_global_scope_omits_tenant(self, channel):
        _run(channel, scope=Scope.GLOBAL, tenant="t1")

        assert channel.call("publish_app").options == (("scope", Scope.GLOBAL),)

    def test_publish_failure_stops_the_sequence(self):
        channel = StubChannel(results={
            "publish_app": InvocationResult(success=False, fault="App already published"),
        })

        with pytest.raises(RemotePublishError) as exc_info:
            _run(channel, sync=True, install=True)

        assert channel.operations == ["publish_app"]
        assert "App already published" in str(exc_info.value)
        assert exc_info.value.outcome.published is False
        assert exc_info.value.outcome.error == str(exc_info.value)


class TestSyncStage:

    def test_sync_uses_default_mode(self, channel):
        outcome = _run(channel, sync=True)

        assert channel.operations == ["publish_app", "sync_tenant", "sync_app"]
        assert channel.call("sync_tenant").options == (("force", True),)
        assert channel.call("sync_app").args == ("MyApp", "1.0.0.0", "default", SyncMode.ADD)
        assert outcome.synchronized is True
        assert outcome.installed is False

    def test_sync_mode_is_passed(self, channel):
        _run(channel, sync=True, sync_mode="ForceSync", tenant="t2")

        assert channel.call("sync_tenant").args == ("t2",)
        assert channel.call("sync_app").args == ("MyApp", "1.0.0.0", "t2", SyncMode.FORCE_SYNC)

    def test_warnings_are_tolerated(self):
        channel = StubChannel(results={
            "sync_app": InvocationResult(success=True, warnings=["Table 50100 will be dropped"]),
        })

        outcome = _run(channel, sync=True)

        assert outcome.synchronized is True

    def test_sync_error_prevents_install(self):
        channel = StubChannel(results={
            "sync_app": InvocationResult(success=False, fault="Destructive changes"),
        })

        with pytest.raises(RemoteSyncError) as exc_info:
            _run(channel, sync=True, install=True)

        assert "install_app" not in channel.operations
        assert exc_info.value.outcome.published is True
        assert exc_info.value.outcome.synchronized is False

    def test_unreadable_metadata_is_a_sync_error(self):
        channel = StubChannel(results={
            "read_app_info": InvocationResult(success=False, fault="not an app file"),
        })

        with pytest.raises(RemoteSyncError):
            _run(channel, sync=True)

        assert channel.operations == ["publish_app"]


class TestInstallStage:

    def test_install_without_sync(self, channel):
        outcome = _run(channel, install=True)

        assert channel.operations == ["publish_app", "install_app"]
        assert channel.call("install_app").args == ("MyApp", "1.0.0.0", "default")
        assert outcome.installed is True
        assert outcome.synchronized is False

    def test_language_is_passed_through_unchanged(self, channel):
        _run(channel, install=True, install_language="xx-NOPE")

        assert channel.call("install_app").options == (("language", "xx-NOPE"),)

    def test_metadata_is_read_once(self, channel):
        _run(channel, sync=True, install=True)

        assert [c.name for c in channel.calls].count("read_app_info") == 1
        assert channel.call("read_app_info").args == ("/run/my/apps/MyApp.app",)

    def test_install_failure(self):
        channel = StubChannel(results={
            "install_app": InvocationResult(success=False, fault="Tenant not mounted"),
        })

        with pytest.raises(RemoteInstallError) as exc_info:
            _run(channel, install=True)

        assert exc_info.value.outcome.published is True
        assert exc_info.value.outcome.installed is False
        assert "Install stage failed" in str(exc_info.value)
