"""Tests for deployment request validation"""

import pytest

from app_deploy.api.exceptions import ValidationError
from app_deploy.constants import PackageType, Scope, SyncMode, TransportPreference
from app_deploy.models import DeploymentRequest


class TestDeploymentRequest:

    def test_defaults(self):
        request = DeploymentRequest("app.app", "bcserver")

        assert request.tenant == "default"
        assert request.package_type == PackageType.EXTENSION
        assert request.transport == TransportPreference.REMOTE
        assert request.scope is None
        assert request.sync_mode is None
        assert not request.uses_direct_endpoint

    def test_string_values_are_coerced(self):
        request = DeploymentRequest(
            "app.app", "bcserver",
            sync_mode="forcesync",
            package_type="SymbolsOnly",
            scope="tenant",
            transport="direct_http",
        )

        assert request.sync_mode == SyncMode.FORCE_SYNC
        assert request.package_type == PackageType.SYMBOLS_ONLY
        assert request.scope == Scope.TENANT
        assert request.is_tenant_scoped
        assert request.uses_direct_endpoint

    @pytest.mark.parametrize("field,value", [
        ("sync_mode", "Merge"),
        ("package_type", "Runtime"),
        ("scope", "Everyone"),
        ("transport", "ftp"),
    ])
    def test_values_outside_closed_sets_are_rejected(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            DeploymentRequest("app.app", "bcserver", **{field: value})

        assert value in str(exc_info.value)

    @pytest.mark.parametrize("kwargs", [
        {"artifact_reference": "", "target_host": "bcserver"},
        {"artifact_reference": "app.app", "target_host": " "},
        {"artifact_reference": "app.app", "target_host": "bcserver", "tenant": ""},
    ])
    def test_required_fields(self, kwargs):
        with pytest.raises(ValidationError):
            DeploymentRequest(**kwargs)

    def test_request_is_immutable(self):
        request = DeploymentRequest("app.app", "bcserver")

        with pytest.raises(AttributeError):
            request.sync = True

    def test_blank_language_is_dropped(self):
        request = DeploymentRequest("app.app", "bcserver", install_language="  ")

        assert request.install_language is None

    def test_to_dict_uses_enum_values(self):
        data = DeploymentRequest("app.app", "bcserver", scope=Scope.GLOBAL).to_dict()

        assert data["scope"] == "Global"
        assert data["package_type"] == "Extension"
        assert data["transport"] == "remote"
