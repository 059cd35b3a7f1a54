"""Deploy command implementation"""

import sys

import click
from rich.console import Console

from ..utils.output import format_deploy_result, format_deploy_error, print_status
from ...api import Deployer
from ...api.exceptions import AppDeployError
from ...constants import SyncMode, PackageType, Scope, TransportPreference, DEFAULT_TENANT
from ...models import DeploymentRequest

console = Console()


def _choices(enum_cls):
    return click.Choice([m.value for m in enum_cls], case_sensitive=False)


@click.command()
@click.argument('target')
@click.argument('artifact')
@click.option('--skip-verification', is_flag=True, help='Publish without signature verification')
@click.option('--sync', is_flag=True, help='Synchronize the app after publishing')
@click.option('--sync-mode', type=_choices(SyncMode), help='Synchronization mode (default: Add)')
@click.option('--install', is_flag=True, help='Install the app after publishing')
@click.option('--tenant', default=DEFAULT_TENANT, show_default=True, help='Tenant to sync and install on')
@click.option('--package-type', type=_choices(PackageType), default=PackageType.EXTENSION.value,
              show_default=True, help='Package type')
@click.option('--scope', type=_choices(Scope), help='Publishing scope')
@click.option('--use-dev-endpoint', is_flag=True,
              help='Upload through the HTTP development endpoint instead of remote execution')
@click.option('--language', 'install_language', help='Installation language (culture tag, e.g. da-DK)')
@click.pass_context
def deploy(ctx, target, artifact, skip_verification, sync, sync_mode, install, tenant,
           package_type, scope, use_dev_endpoint, install_language):
    """Publish an app package to a target

    ARTIFACT is a local file or an http(s) URL. TARGET is a target name
    from the configuration file.

    Examples:

        # Publish, synchronize and install a local package
        app-deploy deploy bcserver ./MyApp_1.0.0.0.app --sync --install

        # Publish from a URL for a single tenant
        app-deploy deploy bcserver https://example.com/MyApp.app --scope Tenant --tenant t1

        # Upload through the development endpoint
        app-deploy deploy bcserver ./MyApp.app --use-dev-endpoint
    """
    try:
        request = DeploymentRequest(
            artifact_reference=artifact,
            target_host=target,
            skip_verification=skip_verification,
            sync=sync,
            sync_mode=sync_mode,
            install=install,
            tenant=tenant,
            package_type=package_type,
            scope=scope,
            transport=TransportPreference.DIRECT_HTTP if use_dev_endpoint else TransportPreference.REMOTE,
            install_language=install_language,
        )

        deployer = Deployer.from_config(ctx.obj.config_path, status_callback=print_status)
        result = deployer.deploy(request)
        format_deploy_result(result)

    except AppDeployError as e:
        format_deploy_error(target, e)
        if ctx.obj.debug:
            console.print_exception()
        sys.exit(1)
