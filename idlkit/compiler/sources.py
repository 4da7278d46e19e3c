"""
Expansion of configured inputs into IDL source files.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from idlkit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def enumerate_sources(
    inputs: Iterable[Union[str, Path]], sort: bool = False
) -> Iterator[Path]:
    """
    Yield the source paths named by the configured inputs.

    Files are yielded as given. Directories are expanded one level deep:
    every direct child is yielded, subdirectories included, without any
    filtering by extension. Children come in filesystem listing order
    unless ``sort`` is set.

    The generator is lazy, so callers compiling as they iterate finish the
    sources of earlier inputs before a bad later input is detected.

    Args:
        inputs: Files or directories, in build order
        sort: Sort directory children by name

    Yields:
        Source paths

    Raises:
        ConfigurationError: If an input is neither a file nor a directory
    """
    for entry in inputs:
        path = Path(entry)

        if path.is_file():
            yield path
        elif path.is_dir():
            children = list(path.iterdir())
            if sort:
                children.sort(key=lambda child: child.name)
            logger.debug(f"Expanded {path} into {len(children)} source(s)")
            yield from children
        else:
            raise ConfigurationError.bad_input(entry)
