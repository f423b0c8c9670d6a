import click

from azmgmt_client import AlertUpdateAction, SecurityCenterClient
from azmgmt_cli.config import get_client
from azmgmt_cli.utils import collect, echo_models, run_async


@click.group()
def alerts():
    """Security Center alerts."""


@alerts.command("list")
@click.option("--resource-group", "-g", help="Only alerts of this resource group")
@click.option("--location", "-l", help="Only alerts stored in this Security Center location")
@click.option("--filter", "filter_", help="OData filter")
@click.option("--limit", type=int, help="Stop after this many alerts")
@click.pass_context
def list_alerts(ctx, resource_group, location, filter_, limit):
    client = get_client(ctx, SecurityCenterClient)

    async def run():
        async with client:
            if location and resource_group:
                pager = client.alerts.list_resource_group_level_alerts_by_region(
                    resource_group, filter=filter_, asc_location=location
                )
            elif location:
                pager = client.alerts.list_subscription_level_alerts_by_region(filter=filter_, asc_location=location)
            elif resource_group:
                pager = client.alerts.list_by_resource_group(resource_group, filter=filter_)
            else:
                pager = client.alerts.list(filter=filter_)
            return await collect(pager, limit)

    echo_models(run_async(run()))


@alerts.command("get")
@click.argument("alert_name")
@click.option("--resource-group", "-g")
@click.option("--location", "-l")
@click.pass_context
def get_alert(ctx, alert_name, resource_group, location):
    client = get_client(ctx, SecurityCenterClient)

    async def run():
        async with client:
            if resource_group:
                return await client.alerts.get_resource_group_level_alerts(
                    alert_name, resource_group, asc_location=location
                )
            return await client.alerts.get_subscription_level_alert(alert_name, asc_location=location)

    echo_models(run_async(run()))


def _update_state(ctx, alert_name, resource_group, location, action: AlertUpdateAction):
    client = get_client(ctx, SecurityCenterClient)

    async def run():
        async with client:
            if resource_group:
                await client.alerts.update_resource_group_level_alert_state(
                    alert_name, action, resource_group, asc_location=location
                )
            else:
                await client.alerts.update_subscription_level_alert_state(
                    alert_name, action, asc_location=location
                )

    run_async(run())
    click.echo(f"{action.value}: {alert_name}")


@alerts.command("dismiss")
@click.argument("alert_name")
@click.option("--resource-group", "-g")
@click.option("--location", "-l")
@click.pass_context
def dismiss_alert(ctx, alert_name, resource_group, location):
    _update_state(ctx, alert_name, resource_group, location, AlertUpdateAction.dismiss)


@alerts.command("reactivate")
@click.argument("alert_name")
@click.option("--resource-group", "-g")
@click.option("--location", "-l")
@click.pass_context
def reactivate_alert(ctx, alert_name, resource_group, location):
    _update_state(ctx, alert_name, resource_group, location, AlertUpdateAction.reactivate)


@click.group()
def security():
    """Security Center provider information."""


@security.command("operations")
@click.pass_context
def security_operations(ctx):
    client = get_client(ctx, SecurityCenterClient)

    async def run():
        async with client:
            return await client.operations.list().to_list()

    echo_models(run_async(run()))


@security.command("locations")
@click.pass_context
def security_locations(ctx):
    client = get_client(ctx, SecurityCenterClient)

    async def run():
        async with client:
            return await client.locations.list().to_list()

    echo_models(run_async(run()))
