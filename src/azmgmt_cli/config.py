import os
from typing import Optional, Type, TypeVar

import click
import yaml
from pydantic import BaseModel

from azmgmt_client import ClientConfig, ManagementClient
from azmgmt_client.config import ENV_ACCESS_TOKEN
from azmgmt_client.http import DEFAULT_BASE_URL

HOME_DIR = os.path.expanduser("~") or os.environ.get("HOME") or os.environ.get("USERPROFILE")
AZMGMT_DIR = os.path.join(HOME_DIR, ".azmgmt")
PROFILE_FILE = "profile.yaml"

TClient = TypeVar("TClient", bound=ManagementClient)


class CLIProfile(BaseModel):
    subscription_id: Optional[str] = None
    asc_location: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    access_token: Optional[str] = None


def default_profile_path() -> str:
    return os.path.join(AZMGMT_DIR, PROFILE_FILE)


def read_profile(path: Optional[str] = None) -> CLIProfile:
    filename = path or default_profile_path()

    if not os.path.exists(filename):
        return CLIProfile()

    with open(filename, "r") as file:
        obj = yaml.safe_load(file)

    if obj is None:
        return CLIProfile()
    return CLIProfile(**obj)


def write_profile(profile: CLIProfile, path: Optional[str] = None):
    filename = path or default_profile_path()
    os.makedirs(os.path.dirname(filename), exist_ok=True)

    with open(filename, "w") as file:
        file.write(yaml.safe_dump(profile.model_dump(exclude_none=True)))


def get_client(ctx: click.Context, client_class: Type[TClient]) -> TClient:
    """Build a service client from the active profile; environment and options win."""
    profile = read_profile(ctx.obj.get("PROFILE_PATH"))
    values = profile.model_dump(exclude={"access_token"}, exclude_none=True)

    env_config = ClientConfig.from_env()
    for name in env_config.model_fields_set:
        if getattr(env_config, name) is not None:
            values[name] = getattr(env_config, name)

    token = os.environ.get(ENV_ACCESS_TOKEN) or profile.access_token
    if not token:
        raise click.UsageError(f"No access token; run 'azmgmt configure' or set {ENV_ACCESS_TOKEN}")

    return client_class(config=ClientConfig(**values), access_token=token)
