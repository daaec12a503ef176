import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .config import GeneratorConfig, OutputMode
from .errors import EstreeError
from .generator import SourceGenerator
from .output import write_output

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--minify", "-m", is_flag=True, default=False, help="Print without optional whitespace")
@click.option("--indent", "-i", default=None, type=str, help="Indentation unit for pretty output")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--no-header", is_flag=True, default=False, help="Omit the generation comment")
@click.option("--validate", is_flag=True, default=False, help="Check the generated source with tree-sitter before writing")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def estree_to_code(config, minify, indent, force, no_header, validate, verbose, path, output):
    """Generate JavaScript source from the ESTree JSON file PATH into OUTPUT."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    if minify:
        config.printer.minify = True
    if indent is not None:
        config.printer.indent = indent
    if force:
        config.output.mode = OutputMode.FORCE
    if no_header:
        config.add_generation_comment = False
    if validate:
        config.output.validate_before_write = True

    with open(path, encoding="utf-8") as f:
        text = f.read()

    generator = SourceGenerator(config, reconstruct_command_line(estree_to_code))
    try:
        out = generator.generate_from_json(text)
        write_output(
            Path(output),
            out,
            force=config.output.mode == OutputMode.FORCE,
            validate=config.output.validate_before_write,
            atomic=config.output.atomic_write,
        )
    except EstreeError as e:
        raise click.ClickException(str(e)) from e

    logger.info("Wrote %d characters to %s", len(out), output)
