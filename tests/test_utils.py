"""Tests for path helpers and transport selection"""

from pathlib import PurePosixPath

import pytest

from app_deploy.api.exceptions import TransportSelectionError
from app_deploy.constants import TransportPreference
from app_deploy.models import DeploymentRequest
from app_deploy.transports import TransportSelector
from app_deploy.utils import (
    is_url,
    filename_from_url,
    join_target_path,
    relative_to,
    format_size,
)


class TestFileUtils:

    @pytest.mark.parametrize("reference,expected", [
        ("https://host/a.app", True),
        ("HTTP://host/a.app", True),
        ("ftp://host/a.app", False),
        ("/tmp/a.app", False),
        ("c:\\apps\\a.app", False),
    ])
    def test_is_url(self, reference, expected):
        assert is_url(reference) is expected

    def test_filename_from_url(self):
        assert filename_from_url("https://host/dl/My%20App_1.0.app?sig=abc#frag") == "My App_1.0.app"

    @pytest.mark.parametrize("url", [
        "https://host/",
        "https://host/dir/",
        "https://host/a/..",
        "https://host/a/%2E%2E",
        "https://host/a/.",
    ])
    def test_filename_from_url_without_basename(self, url):
        with pytest.raises(ValueError):
            filename_from_url(url)

    def test_filename_from_url_decodes_before_splitting(self):
        assert filename_from_url("https://host/..%2F..%2Fescaped.app") == "escaped.app"
        assert filename_from_url("https://host/..%5C..%5Cescaped.app") == "escaped.app"

    def test_join_keeps_target_separator_style(self):
        assert join_target_path("c:\\run\\my", "a.app") == "c:\\run\\my\\a.app"
        assert join_target_path("/run/my/apps", "a.app") == "/run/my/apps/a.app"

    def test_relative_to(self):
        assert relative_to(PurePosixPath("/a/b/c.app"), PurePosixPath("/a")) == PurePosixPath("b/c.app")
        assert relative_to(PurePosixPath("/x/c.app"), PurePosixPath("/a")) is None

    def test_format_size(self):
        assert format_size(512) == "512.00 B"
        assert format_size(2048) == "2.00 KB"


class TestTransportSelector:

    def test_direct_http_preference(self):
        remote, http = object(), object()
        selector = TransportSelector({
            TransportPreference.REMOTE: remote,
            TransportPreference.DIRECT_HTTP: http,
        })

        assert selector.select(DeploymentRequest("a.app", "bc", transport="direct_http")) is http
        assert selector.select(DeploymentRequest("a.app", "bc")) is remote

    def test_unregistered_transport(self):
        selector = TransportSelector({TransportPreference.REMOTE: object()})

        with pytest.raises(TransportSelectionError) as exc_info:
            selector.select(DeploymentRequest("a.app", "bc", transport="direct_http"))

        assert "direct_http" in str(exc_info.value)
