import json
import logging
from pathlib import Path

import click

from .pipeline import GenerationOptions, JsonToModelError, ModelGenerator, TargetLanguage, serialization_styles
from .pipeline.config import LANGUAGE_ALIASES

LANGUAGE_CHOICES = [language.value for language in TargetLanguage] + list(LANGUAGE_ALIASES)


def load_options(config_path: str | None) -> GenerationOptions:
    """Read generation options from a JSON config file, or return the defaults."""
    if config_path is None:
        return GenerationOptions()

    with open(config_path) as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise click.ClickException(f"Config file {config_path} must contain a JSON object")
    return GenerationOptions.from_dict(config)


def format_styles(language: str | None) -> str:
    """One line per language listing its serialization styles, default first."""
    languages = [TargetLanguage.parse(language)] if language else list(TargetLanguage)
    return "\n".join(f"{lang.value}: {', '.join(serialization_styles(lang))}" for lang in languages)


@click.command()
@click.option("--name", "-n", default="Model", show_default=True, type=str, help="Name of the root model")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="JSON file with generation options")
@click.option("--language", "-l", default="typescript", show_default=True, type=click.Choice(LANGUAGE_CHOICES, case_sensitive=False))
@click.option("--serialization", "-s", default=None, type=str, help="Serialization style (see --list-styles)")
@click.option("--constructor/--no-constructor", default=None, help="Emit a constructor for every model")
@click.option("--null-safety/--no-null-safety", default=None, help="Make every field nullable")
@click.option("--package", default=None, type=str, help="Package declaration for Kotlin output")
@click.option("--list-styles", is_flag=True, default=False, help="List the serialization styles and exit")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("path", default="-", type=click.File("r"))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def json_to_model(name, config, language, serialization, constructor, null_safety, package, list_styles, verbose, path, output):
    """Generate model classes from the JSON document in PATH (stdin by default)."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if list_styles:
        click.echo(format_styles(language if _language_given() else None))
        return

    options = load_options(config)

    # Command line flags override the config file
    overrides = {
        "serialization_style": serialization,
        "include_constructor": constructor,
        "null_safety": null_safety,
        "package_name": package,
    }
    options = GenerationOptions.from_dict({**options.to_dict(), **{k: v for k, v in overrides.items() if v is not None}})

    try:
        document = json.load(path)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e}") from e

    try:
        result = ModelGenerator(name, document, options, language).generate()
    except JsonToModelError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(result.code, nl=False)
        return

    output_path = Path(output)
    if output_path.is_dir():
        output_path = output_path / result.suggested_path

    with open(output_path, "w") as f:
        f.write(result.code)
    click.echo(f"Wrote {output_path}", err=True)


def _language_given() -> bool:
    """Whether --language was passed explicitly on the command line."""
    ctx = click.get_current_context()
    return ctx.get_parameter_source("language") == click.core.ParameterSource.COMMANDLINE
