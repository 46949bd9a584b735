from collections.abc import Iterable
from functools import partial
from urllib.parse import unquote

import click

from geolink.config import NAME, VERSION
from geolink.lib.coordinate_parser import parse_coordinate
from geolink.lib.geo_utils import format_coordinate

click.secho = partial(click.secho, color=True)


@click.command()
@click.argument('inputs', nargs=-1, required=True)
@click.option('raw', '--raw', is_flag=True, help='Do not percent-decode the inputs.')
@click.version_option(VERSION, prog_name=NAME, message='%(prog)s %(version)s')
def geo_parse(inputs: Iterable[str], raw: bool) -> None:
    """Print the coordinate found in each INPUT as 'lat,lon'."""
    failed = False

    for value in inputs:
        decoded = value if raw else unquote(value)
        coordinate = parse_coordinate(decoded)
        if coordinate is None:
            click.secho(f'Could not parse coordinates from: "{decoded}"', fg='red', err=True)
            failed = True
            continue
        click.echo(format_coordinate(coordinate))

    if failed:
        raise SystemExit(1)


if __name__ == '__main__':
    geo_parse()
