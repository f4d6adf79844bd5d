#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

import dataclasses
import logging
import sys

import click
import yaml

from gitstream.config import CONFIG_ENV, load_config
from gitstream.errors import GitStreamError
from gitstream.streamwrapper import StreamWrapper

logger = logging.getLogger(__name__)


def dump(values: dict) -> None:
    click.echo(yaml.safe_dump(values, sort_keys=False), nl=False)


@click.group(help="Inspect repository locators such as git:///path/to/repo/file#ref?a=b")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help=(
        "Path to the YAML configuration file. Defaults to the "
        f'"{CONFIG_ENV}" environment variable.'
    ),
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages.")
@click.pass_context
def gitstream(ctx: click.Context, config_path, verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    try:
        config = load_config(config_path)
    except GitStreamError as e:
        logger.error("%s", e)
        sys.exit(1)
    if not verbose:
        logging.getLogger().setLevel(config.log_level)
    ctx.obj = StreamWrapper.from_config(config)


@gitstream.command(help="Print the components of a locator.")
@click.argument("url")
@click.pass_obj
def parse(wrapper: StreamWrapper, url: str):
    try:
        components = wrapper.parse(url)
    except GitStreamError as e:
        logger.error("%s", e)
        sys.exit(1)
    dump(dataclasses.asdict(components))


@gitstream.command(help="Resolve a locator against its repository.")
@click.argument("url")
@click.pass_obj
def info(wrapper: StreamWrapper, url: str):
    try:
        path_information = wrapper.path_information(url)
    except GitStreamError as e:
        logger.error("%s", e)
        sys.exit(1)
    dump(
        {
            "url": path_information.url,
            "repository_path": path_information.repository_path,
            "full_path": path_information.full_path,
            "local_path": path_information.local_path,
            "ref": path_information.ref,
            "arguments": dict(path_information.arguments),
        }
    )


def main():
    gitstream()
