import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .errors import OutputError, SchemaError
from .pipeline import CodeGeneratorConfig, OutputMode, PipelineGenerator, load_api_description
from .pipeline.formatters import get_formatter


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it already exists")
@click.option(
    "--format/--no-format",
    "format_code",
    default=None,
    help="Run the configured formatter (ruff or black) on the generated code",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each classified type and bound family")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def tgtypes_codegen(config, force, format_code, verbose, path, output):
    """Generate Python types from the Bot API description at PATH into OUTPUT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if force:
        config.output.mode = OutputMode.FORCE
    if format_code is not None:
        config.formatter.enabled = format_code
    if config.formatter.enabled:
        try:
            formatter = get_formatter(config.formatter.backend)
        except ValueError as e:
            raise click.ClickException(str(e)) from e
        if format_code and not formatter.is_available():
            raise click.ClickException(f"--format requested but {formatter.name} is not installed")

    try:
        description = load_api_description(path)
        codegen = PipelineGenerator(description, config, command_line=reconstruct_command_line())
        codegen.write(output)
    except (SchemaError, OutputError) as e:
        raise click.ClickException(str(e)) from e
