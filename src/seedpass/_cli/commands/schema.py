import json

import click
from pydantic.json_schema import model_json_schema

from ..._conf import Settings
from ...policy import Policy

__all__ = ["schema"]

_SCHEMA_BUILDERS = {
    "policy": Policy,
    "config": Settings,
}


@click.command()
@click.argument("kind", type=click.Choice(sorted(_SCHEMA_BUILDERS)))
@click.option("--indent", type=click.IntRange(min=0), default=2, show_default=True)
def schema(kind: str, indent: int) -> None:
    """
    Print the JSON schema of a policy or configuration file.

    Examples:

    \b
      $ seedpass schema policy > policy.schema.json
    """
    click.echo(json.dumps(model_json_schema(_SCHEMA_BUILDERS[kind]), indent=indent))
