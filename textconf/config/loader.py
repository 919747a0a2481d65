"""JSON document loading and saving for ConfigNode trees."""

import json
import logging
from pathlib import Path

from textconf.config.node import ConfigNode
from textconf.errors import MappingError

logger = logging.getLogger(__name__)


def loads_json(data: str) -> ConfigNode:
    """Parse a JSON document into a ConfigNode."""
    try:
        return ConfigNode(json.loads(data))
    except json.JSONDecodeError as e:
        raise MappingError(f"Invalid JSON document: {e}") from e


def load_json(path: str | Path) -> ConfigNode:
    """Load a JSON file into a ConfigNode. A missing file yields an empty node."""
    path = Path(path)
    if not path.exists():
        logger.debug("[LOADER] %s does not exist, starting empty", path)
        return ConfigNode()
    try:
        node = loads_json(path.read_text(encoding="utf-8"))
    except MappingError as e:
        raise MappingError(f"Failed to load {path}: {e}") from e
    logger.debug("[LOADER] Loaded %s", path)
    return node


def dumps_json(node: ConfigNode, indent: int | None = None) -> str:
    """Render a node (and everything below it) as JSON."""
    if indent is None:
        from textconf.settings import get_settings

        indent = get_settings().json_indent
    return json.dumps(node.raw(), indent=indent, ensure_ascii=False)


def save_json(node: ConfigNode, path: str | Path, indent: int | None = None) -> None:
    """Write a node to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_json(node, indent) + "\n", encoding="utf-8")
    logger.info("[LOADER] Saved %s", path)
