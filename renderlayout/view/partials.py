"""
Partial Discovery
Lists the partials directory once, at renderer construction
"""
from pathlib import Path
from typing import Tuple

from renderlayout.config import RendererConfig
from renderlayout.exceptions import PartialDiscoveryError
from renderlayout.logging import getLogger

logger = getLogger(__name__)


def discover_partials(config: RendererConfig) -> Tuple[str, ...]:
    """
    Find partial identifiers registered with the template engine

    Every entry of <templates_path>/<partials_path> whose name ends with the
    configured extension becomes "<partials_path>/<name without extension>".
    Directory listing order is kept as is.

    Args:
        config: Resolved renderer configuration

    Returns:
        Tuple of partial identifiers

    Raises:
        PartialDiscoveryError: The directory cannot be listed

    Example:
        # templates/partials/header.html, templates/partials/notes.txt
        discover_partials(config)  # ('partials/header',)
    """
    directory = Path(config.templates_path) / config.partials_path
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.error(f"renderlayout:partials => cannot list {directory}: {e}")
        raise PartialDiscoveryError(str(directory), e.strerror or str(e)) from e

    partials = []
    for entry in entries:
        if not entry.name.endswith(config.extension):
            continue
        stem = entry.name[:-len(config.extension)]
        partials.append(f"{config.partials_path}/{stem}")

    logger.debug(f"renderlayout:partials => {len(partials)} found in {directory}")
    return tuple(partials)
