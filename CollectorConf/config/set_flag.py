"""
Command-line ``--set`` overrides for the collector configuration.

Overrides are written as ``--set=path.to.key=value`` and have a higher
precedence than the configuration file. They are applied key by key rather
than as one bulk merge: arrays and scalars are overridden, maps are joined.
"""

from typing import Callable, List, Sequence

import click

from CollectorConf.config.manager import ConfigManager
from CollectorConf.config.properties import decode_properties
from CollectorConf.config.utils import flatten
from CollectorConf.exceptions import FlagReadError, ParseError
from CollectorConf.utils.logging import get_logger

logger = get_logger(__name__, {'component': 'set_flag'})

SET_FLAG_NAME = 'set'
SET_FLAG_FILE_TYPE = 'properties'
SET_FLAG_HELP = (
    "Set arbitrary component config property. The component has to be defined "
    "in the config file and the flag has a higher precedence. Array config "
    "properties are overridden and maps are joined, "
    "e.g. --set=processors.attributes.actions=[{key: some_key}]. "
    "Example --set=processors.batch.timeout=2s"
)


def set_flag_option(f: Callable) -> Callable:
    """Register the repeatable ``--set`` option on a click command."""
    return click.option(
        f'--{SET_FLAG_NAME}', SET_FLAG_NAME,
        multiple=True,
        default=(),
        metavar='KEY=VALUE',
        help=SET_FLAG_HELP
    )(f)


def get_set_flag_values(ctx: click.Context) -> List[str]:
    """
    Read the raw ``--set`` values from a click context.

    Args:
        ctx: Context of the invoked command

    Returns:
        List[str]: The override tokens in command-line order

    Raises:
        FlagReadError: If the command does not declare the flag or its value
            is not a sequence of strings.
    """
    declared = {param.name for param in ctx.command.params}
    if SET_FLAG_NAME not in declared:
        raise FlagReadError(
            f"flag accessed but not defined: {SET_FLAG_NAME}",
            context={'command': ctx.command.name}
        )

    values = ctx.params.get(SET_FLAG_NAME) or ()
    if isinstance(values, str) or not all(isinstance(v, str) for v in values):
        raise FlagReadError(
            f"flag '{SET_FLAG_NAME}' is not a string array: {values!r}",
            context={'command': ctx.command.name}
        )
    return list(values)


def add_set_flag_properties(store: ConfigManager, properties: Sequence[str]) -> None:
    """
    Override properties in ``store`` from raw ``--set`` values.

    The values are joined into a properties document, decoded into a
    temporary tree, and every leaf of that tree is written to ``store`` with
    ``store.set``. Writing leaf by leaf keeps sibling keys of maps that the
    overrides only partially cover.

    Args:
        store: Configuration store to patch in place
        properties: Raw ``key=value`` tokens, later tokens win

    Raises:
        ParseError: If the tokens are not valid properties syntax.

    Examples:
        >>> store = ConfigManager({"m": {"z": 3}})
        >>> add_set_flag_properties(store, ["m.x=1", "m.y=2"])
        >>> store.get("m")
        {'z': 3, 'x': 1, 'y': 2}
    """
    if not properties:
        return

    document = ''.join(f"{prop.strip()}\n" for prop in properties)

    try:
        overrides = decode_properties(document)
    except ParseError as e:
        raise ParseError(
            f"failed to read set flag config: {e}",
            context={'file_type': SET_FLAG_FILE_TYPE, **e.context},
            cause=e
        ) from e

    # A bulk merge would replace whole maps, so set each leaf individually
    flat = flatten(overrides)
    for key, value in flat.items():
        logger.debug(f"Setting {key} from --{SET_FLAG_NAME}")
        store.set(key, value)

    logger.info(f"Applied {len(flat)} configuration override(s) from --{SET_FLAG_NAME}",
                extra={'keys': sorted(flat)})


def apply_set_flag(store: ConfigManager, ctx: click.Context) -> None:
    """
    Apply the invoked command's ``--set`` values to ``store``.

    Raises:
        FlagReadError: If the flag cannot be read from ``ctx``.
        ParseError: If the values are not valid properties syntax.
    """
    add_set_flag_properties(store, get_set_flag_values(ctx))
