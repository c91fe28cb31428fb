"""Check a single value against a field's rules."""

import asyncio
import json
from pathlib import Path

import click

from fieldguard.cli.rules_cmd import import_plugins, plugin_option
from fieldguard.config import EngineConfig
from fieldguard.metadata.loader import RuleConfigError, RulesLoader
from fieldguard.validation.engine import FieldValidator
from fieldguard.validation.types import InputElement


@click.command()
@click.argument("rules_path", type=click.Path(exists=True, path_type=Path))
@click.argument("field_name")
@click.argument("value")
@click.option(
    "--all",
    "collect_all",
    is_flag=True,
    default=False,
    help="Collect every failing rule (default: FIELDGUARD_CRITERIA_MODE).",
)
@click.option(
    "--number",
    "as_number",
    is_flag=True,
    default=False,
    help="Treat the input as a numeric input.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Parse VALUE as JSON (lists, booleans, null, numbers).",
)
@plugin_option
def check(
    rules_path: Path,
    field_name: str,
    value: str,
    collect_all: bool,
    as_number: bool,
    as_json: bool,
    plugins: tuple[str, ...],
):
    """Validate VALUE against the rules of FIELD_NAME and print the outcome as JSON."""
    import_plugins(plugins)

    loader = RulesLoader(rules_path)
    try:
        loader.load()
    except RuleConfigError as e:
        click.echo(click.style(f"Rule loading failed: {e}", fg="red"), err=True)
        raise SystemExit(1)

    definition = loader.get_field(field_name)
    if definition is None:
        available = ", ".join(loader.list_fields()) or "none"
        click.echo(
            click.style(f"Unknown field '{field_name}'. Available: {available}", fg="red"),
            err=True,
        )
        raise SystemExit(1)

    if as_json:
        try:
            field_value = json.loads(value)
        except json.JSONDecodeError as e:
            click.echo(click.style(f"VALUE is not valid JSON: {e}", fg="red"), err=True)
            raise SystemExit(1)
    else:
        field_value = value

    if as_number:
        definition.value_as_number = True
    element = InputElement(
        name=field_name,
        type="number" if definition.value_as_number else "text",
        value=value,
    )

    validator = FieldValidator.from_config(EngineConfig.from_env())
    outcome = asyncio.run(
        validator.validate(
            definition.descriptor(field_value, element=element),
            collect_all_errors=True if collect_all else None,
        )
    )

    result = {name: error.to_dict() for name, error in outcome.items()}
    click.echo(json.dumps(result, indent=2, default=str))
    if outcome:
        raise SystemExit(1)
