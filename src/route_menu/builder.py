"""Building menu trees from YAML definitions."""
import logging
import yaml

from .linkable import Linkable
from .menu import MenuItem

logger = logging.getLogger(__name__)


class MenuConfigError(Exception):
    """Raised when a menu definition cannot be loaded or parsed."""


def load_menu(path):
    """Load a menu configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        The parsed configuration mapping (empty if the file is empty)
    """
    try:
        with open(path, 'r') as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load menu config: {e}")
        raise MenuConfigError(f"Failed to load menu config '{path}': {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.error(f"Menu config must be a mapping, got {type(config).__name__}")
        raise MenuConfigError(f"Menu config '{path}' must be a mapping")
    return config


def _parse_target(raw):
    if raw.get('route'):
        params = raw.get('route_params')
        if params is not None and not isinstance(params, dict):
            raise MenuConfigError(f"Route params must be a mapping, got {params!r}")
        return Linkable(raw['route'], params)
    return raw.get('uri')


def parse_menu(raw_items, parent=None):
    """Create menu items from their raw definitions.

    Args:
        raw_items: List of item mappings, children nested under 'items'
        parent: Optional item the created items are attached to

    Returns:
        List of the created top-level items
    """
    if raw_items is None:
        return []
    if not isinstance(raw_items, list):
        raise MenuConfigError(f"Menu items must be a list, got {type(raw_items).__name__}")

    nodes = []
    for raw in raw_items:
        if not isinstance(raw, dict):
            raise MenuConfigError(f"Menu item must be a mapping, got {raw!r}")

        extras = raw.get('extras')
        if extras is not None and not isinstance(extras, dict):
            raise MenuConfigError(f"Menu item extras must be a mapping, got {extras!r}")

        current = raw.get('current')
        item = MenuItem(
            parent=parent,
            label=raw.get('label'),
            target=_parse_target(raw),
            current=None if current is None else bool(current),
            extras=extras,
            virtual=raw.get('virtual', False),
        )
        logger.debug(f"Parsed menu item {item.label!r} with target {item.target!r}")
        parse_menu(raw.get('items'), parent=item)
        nodes.append(item)
    return nodes


def stash_route_extras(root):
    """Store the route of every Linkable target in the item extras.

    Voters only see `_route` and `_route_params`, so this has to run before
    voting. Items with a URI target or without target are left untouched.
    """
    pending = [root]
    while pending:
        item = pending.pop()
        target = item.target
        if isinstance(target, Linkable):
            item.set_extra('_route', target.route)
            item.set_extra('_route_params', dict(target.parameters))
        pending.extend(item.children)
    return root
