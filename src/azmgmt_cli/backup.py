import click

from azmgmt_client import RecoveryServicesBackupClient
from azmgmt_cli.config import get_client
from azmgmt_cli.utils import echo_models, run_async


@click.group()
def backup():
    """Recovery Services backup operations."""


@backup.command("security-pin")
@click.option("--vault", "-v", "vault_name", required=True)
@click.option("--resource-group", "-g", required=True)
@click.pass_context
def security_pin(ctx, vault_name, resource_group):
    """Issue a security PIN for critical backup operations."""
    client = get_client(ctx, RecoveryServicesBackupClient)

    async def run():
        async with client:
            return await client.security_pins.get(vault_name, resource_group)

    echo_models(run_async(run()))
