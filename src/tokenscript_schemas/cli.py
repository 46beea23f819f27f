"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from tokenscript_schemas.bundling import (
    BUNDLE_PRESETS,
    BundleError,
    SelectiveBundleRequest,
    bundle_all_schemas,
    bundle_selective_schemas,
    expand_preset_schemas,
    write_bundle_file,
    write_json_artifact,
)
from tokenscript_schemas.bundling.artifact_writer import render_json
from tokenscript_schemas.configuration import (
    DEFAULT_BUNDLE_OUTPUT,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_REGISTRY_OUTPUT_DIR,
    ConfigurationError,
    load_bundle_config,
    resolve_bundler_settings,
    write_placeholder_configuration,
)
from tokenscript_schemas.results_writing import (
    format_dependency_tree,
    format_dry_run_output,
    format_list_output,
    format_preset_info,
)
from tokenscript_schemas.schema_management import SchemaError, list_schemas, load_schema_directory


class CliError(Exception):
    """Custom CLI error."""


_schemas_dir_option = click.option(
    "--schemas-dir",
    "schemas_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Schema store directory containing types/ and functions/ [default: src/schemas]",
)
_base_url_option = click.option(
    "--base-url",
    "base_url",
    required=False,
    help="Registry base URL used for bundled schema URIs",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tokenscript-schemas")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress at INFO level.")
def cli(verbose: bool) -> None:
    """Bundle TokenScript color schemas with their dependencies."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="bundle")
@click.argument("schemas", nargs=-1)
@click.option(
    "--config",
    "-c",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON bundle configuration file",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Bundle output path [default: {DEFAULT_BUNDLE_OUTPUT}]",
)
@click.option(
    "--dry-run",
    "-d",
    is_flag=True,
    default=False,
    help="Preview what would be bundled without writing.",
)
@_schemas_dir_option
@_base_url_option
def bundle(
    schemas: tuple[str, ...],
    config_path: str | None,
    output_path: str | None,
    dry_run: bool,
    schemas_dir: str | None,
    base_url: str | None,
) -> None:
    """Bundle schemas and their dependencies into one JSON file."""
    try:
        config = load_bundle_config(config_path) if config_path else None
        requested = list(config.schemas) if config else list(schemas)
        if not requested:
            raise CliError("No schemas specified. Provide schemas as arguments or via --config")
        settings = resolve_bundler_settings(
            config=config, schemas_dir=schemas_dir, base_url=base_url, output_path=output_path
        )
        result = bundle_selective_schemas(
            SelectiveBundleRequest(
                schemas=tuple(expand_preset_schemas(requested)),
                schemas_dir=settings.schemas_dir,
                base_url=settings.base_url,
                cli_args=tuple(requested),
            )
        )
        metadata = result.metadata
        click.echo("")
        click.echo(format_dependency_tree(result.dependency_tree, metadata.requested_schemas))
        click.echo("")
        if dry_run:
            click.echo(
                format_dry_run_output(metadata.requested_schemas, metadata.resolved_dependencies)
            )
            return
        written = write_bundle_file(result, settings.output_path)
    except (ConfigurationError, BundleError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"✓ Bundled {len(result.metadata.resolved_dependencies)} schemas → {written}")


@cli.command(name="build")
@click.argument("directory", type=click.Path(path_type=str))
@click.option(
    "--output",
    "-o",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Output file path (defaults to stdout)",
)
@click.option("--pretty", "-p", is_flag=True, default=False, help="Pretty print JSON output.")
@_base_url_option
def build(directory: str, output_path: str | None, pretty: bool, base_url: str | None) -> None:
    """Build an individual schema directory with its scripts inlined."""
    schema_dir = Path(directory)
    if not schema_dir.is_dir():
        raise CliError(f"Directory not found: {schema_dir.resolve()}")
    try:
        document = load_schema_directory(schema_dir, base_url=base_url)
        if output_path is None:
            click.echo(render_json(document.to_dict(), pretty=pretty))
            return
        written = write_json_artifact(output_path, document.to_dict(), pretty=pretty)
    except (SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"✓ Built {document.kind.value}:{document.name} → {written}")


@cli.command(name="build-registry")
@_schemas_dir_option
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help=f"Directory for registry artifacts [default: {DEFAULT_REGISTRY_OUTPUT_DIR}]",
)
@_base_url_option
def build_registry_command(
    schemas_dir: str | None, output_dir: str | None, base_url: str | None
) -> None:
    """Bundle every schema of the store into registry artifacts."""
    settings = resolve_bundler_settings(schemas_dir=schemas_dir, base_url=base_url)
    destination = Path(output_dir) if output_dir else DEFAULT_REGISTRY_OUTPUT_DIR
    try:
        outcome = bundle_all_schemas(
            settings.schemas_dir,
            destination,
            base_url=settings.base_url,
            cli_args=tuple(arg for arg in (schemas_dir, output_dir) if arg),
        )
    except (BundleError, OSError) as exc:
        raise CliError(str(exc)) from exc
    registry = outcome.registry
    click.echo(f"Types: {len(registry.types)}")
    click.echo(f"Functions: {len(registry.functions)}")
    click.echo(f"Total: {registry.total_schemas}")
    for failed in outcome.failed:
        click.echo(f"✗ Failed to bundle {failed}", err=True)
    click.echo(str(destination.resolve()))


@cli.command(name="list")
@click.option("--types", "types_only", is_flag=True, default=False, help="List only type schemas.")
@click.option(
    "--functions", "functions_only", is_flag=True, default=False, help="List only functions."
)
@_schemas_dir_option
def list_command(types_only: bool, functions_only: bool, schemas_dir: str | None) -> None:
    """List available schemas."""
    settings = resolve_bundler_settings(schemas_dir=schemas_dir)
    show_all = not types_only and not functions_only
    show_types = types_only or show_all
    show_functions = functions_only or show_all
    listing = list_schemas(settings.schemas_dir, types=show_types, functions=show_functions)
    click.echo(format_list_output(listing, types=show_types, functions=show_functions))


@cli.command(name="presets")
def presets() -> None:
    """List available bundle presets."""
    click.echo(format_preset_info(BUNDLE_PRESETS))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML bundle configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML bundle configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
