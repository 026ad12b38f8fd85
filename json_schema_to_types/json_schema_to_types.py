import json
import logging
import sys

import click

from .config import ParserConfig
from .errors import SchemaParseError
from .parser import parse_schema_documents_report
from .parser.aggregator import load_schema_file
from .printers import ReportPrinter
from .utils import module_name_from_path


@click.command()
@click.option("--module-name", "-m", default=None, type=str, help="Module name stored on every schema")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--strict", is_flag=True, default=False, help="Fail on nodes whose shape cannot be determined")
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, resolve_path=True))
def json_schema_to_types(module_name, config, strict, output, verbose, paths):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = ParserConfig.from_dict(json.load(f))
    else:
        config = ParserConfig()

    # CLI flag overrides the config file if set
    if strict:
        config.strict = True

    if module_name is None:
        module_name = module_name_from_path(paths[0])

    try:
        documents = [load_schema_file(path) for path in paths]
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON: {e}") from e

    try:
        report = parse_schema_documents_report(documents, module_name, config)
    except SchemaParseError as e:
        raise click.ClickException(str(e)) from e

    out = ReportPrinter().render(report.schemas)
    if output is None:
        click.echo(out, nl=False)
    else:
        with open(output, "w") as f:
            f.write(out)

    for error in report.errors:
        click.echo(f"error: {error}", err=True)
    if not report.ok:
        sys.exit(1)
