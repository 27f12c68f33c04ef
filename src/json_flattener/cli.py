"""Command-line interface for the JSON Flattener."""

import logging
import sys
from typing import Any, Optional
import click
from . import __version__
from .config import FlattenerConfig
from .error_handler import ErrorHandler
from .flattener import Flattener
from .parser import JSONParser
from .types import PlainArrayFormatting, SurroundedArrayFormatting


def _fail(ctx: click.Context, message: str, suggestion: Optional[str] = None):
    click.echo(f"Error: {message}", err=True)
    if suggestion:
        click.echo(f"Hint: {suggestion}", err=True)
    ctx.exit(1)


def _flatten_or_fail(ctx: click.Context, flattener: Flattener, error_handler: ErrorHandler,
                     data: Any, location: str = "") -> dict:
    result = flattener.flatten(data)
    if not result.success:
        response = error_handler.handle_flatten_error(result.error)
        _fail(ctx, f"{location}{result.error}", response.suggested_action)
    return result.value


@click.command()
@click.version_option(version=__version__)
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--output', '-o', type=click.File('w', encoding='utf-8'), default='-',
              help='Output file (default: stdout)')
@click.option('--separator', '-s', default='.', show_default=True,
              help='String inserted between nested key segments')
@click.option('--array-format', type=click.Choice(['plain', 'surrounded']), default='plain',
              show_default=True, help='Plain appends "<separator><index>", surrounded wraps the index')
@click.option('--array-start', default='[', show_default=True, help='Opening string for surrounded indices')
@click.option('--array-end', default=']', show_default=True, help='Closing string for surrounded indices')
@click.option('--preserve-empty-arrays', is_flag=True, help='Keep empty arrays as leaf values')
@click.option('--preserve-empty-objects', is_flag=True, help='Keep empty objects as leaf values')
@click.option('--infer-types', is_flag=True, help='Convert numeric and boolean strings to numbers and booleans')
@click.option('--lines', is_flag=True, help='Treat input as JSON Lines, one document per line')
@click.option('--compact', is_flag=True, help='Emit compact JSON output')
@click.option('--indent', default=2, show_default=True, help='Indentation of non-compact output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def main(ctx: click.Context, input_file, output, separator: str, array_format: str,
         array_start: str, array_end: str, preserve_empty_arrays: bool,
         preserve_empty_objects: bool, infer_types: bool, lines: bool,
         compact: bool, indent: int, verbose: bool):
    """Flatten a nested JSON object read from INPUT_FILE (default: stdin)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format='%(levelname)s %(name)s: %(message)s')

    if array_format == 'surrounded':
        formatting = SurroundedArrayFormatting(start=array_start, end=array_end)
    else:
        formatting = PlainArrayFormatting()

    config = FlattenerConfig(
        key_separator=separator,
        array_formatting=formatting,
        preserve_empty_arrays=preserve_empty_arrays,
        preserve_empty_objects=preserve_empty_objects,
        infer_types=infer_types,
    )
    error_handler = ErrorHandler()
    parser = JSONParser(error_handler)
    flattener = Flattener(config)

    if lines:
        try:
            for line_number, data in parser.parse_lines(input_file):
                flat = _flatten_or_fail(ctx, flattener, error_handler, data,
                                        location=f"line {line_number}: ")
                output.write(parser.serialize(flat) + "\n")
        except ValueError as e:
            _fail(ctx, str(e), "Fix the JSON syntax of the input.")
        return

    try:
        data = parser.parse(input_file.read())
    except ValueError as e:
        _fail(ctx, str(e), "Fix the JSON syntax of the input.")

    flat = _flatten_or_fail(ctx, flattener, error_handler, data)
    output.write(parser.serialize(flat, indent=None if compact else indent) + "\n")


if __name__ == '__main__':
    main()
