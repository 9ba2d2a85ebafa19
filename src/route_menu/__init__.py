"""Route Menu - A menu tree with route based current item voting."""

from .main import MenuController, main
from .menu import MenuItem
from .linkable import Linkable
from .request import Request, RequestStack
from .voter import ABSTAIN, Voter, SimpleRouteVoter, VoterChain
from .builder import MenuConfigError, load_menu, parse_menu, stash_route_extras

__all__ = [
    'MenuController', 'main', 'MenuItem', 'Linkable', 'Request', 'RequestStack',
    'ABSTAIN', 'Voter', 'SimpleRouteVoter', 'VoterChain',
    'MenuConfigError', 'load_menu', 'parse_menu', 'stash_route_extras',
]
