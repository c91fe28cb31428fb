"""Rule file CLI commands."""

import importlib
from pathlib import Path

import click

from fieldguard.metadata.loader import RuleConfigError, RulesLoader
from fieldguard.metadata.validator import validate_rules_path


def import_plugins(plugins: tuple[str, ...]) -> None:
    """Import modules that register custom validators."""
    for module_name in plugins:
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            click.echo(click.style(f"Cannot import plugin '{module_name}': {e}", fg="red"), err=True)
            raise SystemExit(1)


plugin_option = click.option(
    "--plugin",
    "plugins",
    multiple=True,
    help="Module to import before loading rules (registers custom validators).",
)


@click.group()
def rules():
    """Rule file commands."""
    pass


@rules.command()
@click.argument("rules_path", type=click.Path(exists=True, path_type=Path))
@plugin_option
def validate(rules_path: Path, plugins: tuple[str, ...]):
    """Validate rule files against the JSON Schema, then load them."""
    import_plugins(plugins)

    # ── Schema validation ────────────────────────────────────────────────────
    issues = validate_rules_path(rules_path)
    for issue in issues:
        click.echo(click.style(str(issue), fg="red"))

    if issues:
        click.echo(click.style(f"\n{len(issues)} schema error(s) found", fg="red", bold=True))
        raise SystemExit(1)

    # ── Semantic validation (patterns compile, validators are registered) ───
    loader = RulesLoader(rules_path)
    try:
        loader.load()
    except RuleConfigError as e:
        click.echo(click.style(f"\nRule loading failed: {e}", fg="red"), err=True)
        raise SystemExit(1)

    fields = loader.list_fields()
    click.echo(f"Loaded {len(fields)} field(s):")
    for name in fields:
        definition = loader.get_field(name)
        declared = [
            attr
            for attr, spec in vars(definition.rules).items()
            if spec is not None
        ]
        click.echo(f"  ✓ {name} ({', '.join(declared) or 'no rules'})")

    click.echo(click.style("\nAll rules are valid.", fg="green", bold=True))
