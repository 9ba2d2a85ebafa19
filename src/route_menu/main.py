import sys
import argparse
import logging
from pathlib import Path

# Local imports
from .builder import MenuConfigError, load_menu, parse_menu, stash_route_extras
from .menu import MenuItem
from .request import Request, RequestStack
from .voter import SimpleRouteVoter, VoterChain

logger = logging.getLogger(__name__)


class MenuController:
    def __init__(self, config_path, request_stack=None, also_check_parameters=None):
        self.config = load_menu(config_path)
        self.voter_conf = self.config.get('voter') or {}
        if not isinstance(self.voter_conf, dict):
            logger.error(f"Voter config must be a mapping, got {self.voter_conf!r}")
            raise MenuConfigError(f"Voter config must be a mapping, got {self.voter_conf!r}")
        self.request_stack = request_stack if request_stack is not None else RequestStack()

        # Voters
        if also_check_parameters is None:
            also_check_parameters = self.voter_conf.get('also_check_parameters', False)
        self.also_check_parameters = bool(also_check_parameters)
        self.voters = self._build_voters(self.request_stack)

        # Load Menu Tree
        self.root = MenuItem(virtual=True)
        parse_menu(self.config.get('menu'), parent=self.root)
        stash_route_extras(self.root)

    def _build_voters(self, request_stack):
        return VoterChain([
            SimpleRouteVoter(request_stack, self.also_check_parameters),
        ])

    def _vote(self, voters, description):
        tree = self.root.clone()
        current = voters.mark_current(tree)
        logger.info(f"{description} marks {len(current)} current item(s)")
        return tree

    def current_tree(self):
        """Vote on a fresh copy of the menu for the main request of the shared stack."""
        return self._vote(self.voters, "Main request")

    def activate(self, route, params=None):
        """Vote on a fresh copy of the menu for the given route.

        The vote runs against its own request stack, so requests already on
        the shared stack do not take part.

        Args:
            route: Name of the active route
            params: Parameters of the active route

        Returns:
            The voted copy of the menu root
        """
        request_stack = RequestStack()
        request_stack.push(Request(route, params or {}))
        return self._vote(self._build_voters(request_stack), f"Route '{route}'")

    def render_lines(self, root):
        """Render the visible items below `root`, one per line."""
        lines = []
        self._render(root, 0, lines)
        return lines

    def _render(self, item, depth, lines):
        for child in item.visible_children:
            prefix = ">" if child.is_current else " "
            lines.append(f"{'  ' * depth}{prefix}{child.label}")
            self._render(child, depth + 1, lines)


def _parse_params(raw_params):
    params = {}
    for raw in raw_params:
        key, sep, value = raw.partition('=')
        if not sep or not key:
            raise ValueError(f"Invalid parameter '{raw}', expected key=value")
        params[key] = value
    return params


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = argparse.ArgumentParser(description="Route Menu")
    parser.add_argument("--config", default="menu.yaml", help="Path to menu config file")
    parser.add_argument("--route", help="Name of the active route")
    parser.add_argument("--param", action="append", default=[], help="Route parameter as key=value")
    parser.add_argument("--check-parameters", action="store_true",
                        help="Also compare route parameters when voting")
    args = parser.parse_args(argv)

    try:
        params = _parse_params(args.param)
    except ValueError as e:
        parser.error(str(e))

    try:
        app = MenuController(
            Path(args.config),
            also_check_parameters=True if args.check_parameters else None,
        )
    except MenuConfigError as e:
        logger.error(f"Failed to load config: {e}")
        sys.exit(1)

    tree = app.activate(args.route, params) if args.route else app.root
    for line in app.render_lines(tree):
        print(line)


if __name__ == "__main__":
    main()
