import logging
import sys

import click

from azmgmt_client import AzureMgmtError
from azmgmt_cli.backup import backup
from azmgmt_cli.config import CLIProfile, read_profile, write_profile
from azmgmt_cli.keyvault import keyvault
from azmgmt_cli.security import alerts, security


@click.group()
@click.option(
    '--profile',
    envvar='AZMGMT_PROFILE',
    type=click.Path(dir_okay=False),
    help='Path to a profile YAML file (overrides ~/.azmgmt/profile.yaml)'
)
@click.option('--verbose', '-v', is_flag=True, help='Log HTTP requests')
@click.pass_context
def cli(ctx, profile, verbose):
    """azmgmt - Azure management-plane client."""
    ctx.ensure_object(dict)
    ctx.obj['PROFILE_PATH'] = profile

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.option("--subscription-id", "-s", help="Subscription id")
@click.option("--asc-location", "-l", help="Default Security Center location")
@click.option("--base-url", help="ARM endpoint")
@click.option("--access-token", help="Bearer token")
@click.pass_context
def configure(ctx, subscription_id, asc_location, base_url, access_token):
    """Create or update the active profile."""
    path = ctx.obj.get('PROFILE_PATH')
    current = read_profile(path)

    updates = {
        "subscription_id": subscription_id or click.prompt("Subscription id", default=current.subscription_id or ""),
        "asc_location": asc_location or current.asc_location,
        "base_url": base_url or current.base_url,
        "access_token": access_token or current.access_token,
    }
    write_profile(CLIProfile(**{k: v for k, v in updates.items() if v}), path)

    click.echo("Profile saved!")


cli.add_command(configure, "configure")
cli.add_command(alerts, "alerts")
cli.add_command(security, "security")
cli.add_command(keyvault, "keyvault")
cli.add_command(backup, "backup")


def main():
    try:
        cli()
    except AzureMgmtError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
