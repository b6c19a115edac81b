from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from sdn.config import DEFAULT_OPTIONS
from sdn.printer import dumps_all
from sdn.reader.builder import parse
from sdn.types import Value

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load(path: PathLike, encoding: Optional[str] = None) -> List[Value]:
    """Read and parse an SDN file."""
    path = Path(path)
    text = path.read_text(encoding=encoding or DEFAULT_OPTIONS["encoding"])
    values = parse(text)
    log.debug("loaded %d value(s) from %s", len(values), path)
    return values


def dump(
    values: Iterable[Value],
    path: PathLike,
    encoding: Optional[str] = None,
    sort_keys: Optional[bool] = None,
) -> None:
    """Write values to `path`, one canonical value per line."""
    path = Path(path)
    if sort_keys is None:
        sort_keys = DEFAULT_OPTIONS["sort_keys"]
    values = list(values)
    text = dumps_all(values, sort_keys=sort_keys)
    path.write_text(text + "\n" if text else "", encoding=encoding or DEFAULT_OPTIONS["encoding"])
    log.debug("wrote %d value(s) to %s", len(values), path)
