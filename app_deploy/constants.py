"""Global constants for app-deploy"""

from enum import Enum

APP_NAME = "app-deploy"
LOG_FORMAT = "%(message)s"

# Version related
CONFIG_VERSION = "1.0"

# Project identification
PROJECT_CONFIG_FILE = ".app-deploy.yaml"

# Staging
DEFAULT_TEMP_DIR_NAME = "app-deploy"
DEFAULT_TARGET_STAGING_DIR = "C:\\run\\my"
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1MB

# Target defaults
DEFAULT_TENANT = "default"
DEFAULT_DEV_SERVICES_PORT = 7049
DEFAULT_SERVER_INSTANCE = "BC"
DEV_APPS_ENDPOINT = "dev/apps"
SCHEMA_UPDATE_MODE = "synchronize"

# Remote operation names
OP_PUBLISH_APP = "publish_app"
OP_SYNC_TENANT = "sync_tenant"
OP_SYNC_APP = "sync_app"
OP_INSTALL_APP = "install_app"
OP_READ_APP_INFO = "read_app_info"

# Container runner
DEFAULT_DOCKER_COMMAND = "docker"
DEFAULT_RUNNER_COMMAND = ["pwsh", "-NoProfile", "-File", "C:\\run\\my\\invoke-operation.ps1"]
DEFAULT_REMOVE_COMMAND = ["pwsh", "-NoProfile", "-Command", "Remove-Item -Force -LiteralPath"]


class SyncMode(Enum):
    ADD = "Add"
    CLEAN = "Clean"
    DEVELOPMENT = "Development"
    FORCE_SYNC = "ForceSync"


class PackageType(Enum):
    EXTENSION = "Extension"
    SYMBOLS_ONLY = "SymbolsOnly"


class Scope(Enum):
    GLOBAL = "Global"
    TENANT = "Tenant"


class TransportPreference(Enum):
    REMOTE = "remote"
    DIRECT_HTTP = "direct_http"


class CredentialMode(Enum):
    WINDOWS = "Windows"
    USER_PASSWORD = "UserPassword"
    NAV_USER_PASSWORD = "NavUserPassword"
    AAD = "AAD"

    @property
    def is_password_based(self) -> bool:
        return self in (CredentialMode.USER_PASSWORD, CredentialMode.NAV_USER_PASSWORD)


DEFAULT_SYNC_MODE = SyncMode.ADD


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "AD001"
    VALIDATION_FAILED = "AD002"
    STAGING_FAILED = "AD003"
    TRANSPORT_SELECTION_FAILED = "AD004"
    HTTP_PUBLISH_FAILED = "AD005"
    REMOTE_PUBLISH_FAILED = "AD006"
    REMOTE_SYNC_FAILED = "AD007"
    REMOTE_INSTALL_FAILED = "AD008"
    TARGET_NOT_FOUND = "AD009"
    CHANNEL_FAILED = "AD010"


# Environment variables
ENV_CONFIG_PATH = "APP_DEPLOY_CONFIG"
ENV_TEMP_DIR = "APP_DEPLOY_TEMP"
ENV_LOG_LEVEL = "APP_DEPLOY_LOG_LEVEL"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_ARROW = "→"

# Message templates
MSG_STAGING = "Staging {reference} for {target}"
MSG_STAGED = f"Staged {{reference}} {EMOJI_ARROW} {{path}}"
MSG_TRANSPORT_START = "Publishing via {transport} transport to {target}"
MSG_TRANSPORT_DONE = "{transport} transport completed for {target}"
MSG_DEPLOY_SUCCESS = f"{EMOJI_SUCCESS} Deployed {{artifact}} to {{target}}"
MSG_DEPLOY_FAILED = f"{EMOJI_ERROR} Deployment to {{target}} failed: {{error}}"
