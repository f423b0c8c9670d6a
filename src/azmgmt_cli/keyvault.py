import click

from azmgmt_client import KeyVaultManagementClient
from azmgmt_cli.config import get_client
from azmgmt_cli.utils import collect, echo_models, run_async


@click.group()
def keyvault():
    """Key Vault management operations."""


@keyvault.command("operations")
@click.option("--log-specs", is_flag=True, help="Only print the log specifications of each operation")
@click.pass_context
def keyvault_operations(ctx, log_specs):
    client = get_client(ctx, KeyVaultManagementClient)

    async def run():
        async with client:
            return await client.operations.list().to_list()

    operations = run_async(run())
    if not log_specs:
        echo_models(operations)
        return

    for operation in operations:
        spec = operation.service_specification
        for log in (spec.log_specifications if spec else None) or []:
            click.echo(f"{operation.name}\t{log.name}\t{log.blob_duration or ''}")


@keyvault.command("vaults")
@click.option("--resource-group", "-g")
@click.option("--name", "-n", help="Get a single vault (requires --resource-group)")
@click.option("--top", type=int, help="Maximum number of vaults per page")
@click.option("--limit", type=int, help="Stop after this many vaults")
@click.pass_context
def keyvault_vaults(ctx, resource_group, name, top, limit):
    if name and not resource_group:
        raise click.UsageError("--name requires --resource-group")

    client = get_client(ctx, KeyVaultManagementClient)

    async def run():
        async with client:
            if name:
                return await client.vaults.get(resource_group, name)
            if resource_group:
                return await collect(client.vaults.list_by_resource_group(resource_group, top=top), limit)
            return await collect(client.vaults.list_by_subscription(top=top), limit)

    echo_models(run_async(run()))
