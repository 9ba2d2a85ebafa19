"""Voters deciding which menu items are current."""
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# A voter without an opinion on an item returns ABSTAIN.
ABSTAIN = None


class Voter(ABC):
    """Decides whether a menu item is the current one."""

    @abstractmethod
    def vote(self, item):
        """Vote on `item`.

        Returns:
            True or False, or ABSTAIN if the voter has no opinion.
        """


class SimpleRouteVoter(Voter):
    """Checks whether the route of the item matches the current route.

    Targets have already been resolved when voting happens, so the route of
    the item is read from its `_route` / `_route_params` extras.
    """
    def __init__(self, request_stack, also_check_parameters=False):
        self.request_stack = request_stack
        self.also_check_parameters = also_check_parameters

    def vote(self, item):
        request = self.request_stack.main_request
        if request is None:
            logger.debug(f"No main request, abstaining on {item!r}")
            return ABSTAIN

        route = request.route
        if route is None:
            logger.debug(f"Main request has no route, abstaining on {item!r}")
            return ABSTAIN

        target_route = item.get_extra('_route')
        if target_route is None:
            logger.debug(f"No route stored on {item!r}, abstaining")
            return ABSTAIN

        if type(target_route) is not type(route) or target_route != route:
            logger.debug(f"Route '{route}' does not match {item!r}")
            return False

        if not self.also_check_parameters:
            logger.debug(f"Route '{route}' matches {item!r}")
            return True

        result = self._check_parameters(
            request.route_params,
            item.get_extra('_route_params', {}),
        )
        logger.debug(f"Parameter check for route '{route}' on {item!r}: {result}")
        return result

    def _check_parameters(self, left, right):
        # Differing counts are let through as a match.
        if len(left) == len(right):
            for key, value in left.items():
                if key not in right or not self.compare(right[key], value):
                    return False
        return True

    def compare(self, left, right):
        """Compare two parameter values; override for custom equivalence."""
        return type(left) is type(right) and left == right


class VoterChain:
    """Asks a list of voters in order; the first decided vote wins."""
    def __init__(self, voters):
        self.voters = list(voters)

    def vote(self, item):
        for voter in self.voters:
            result = voter.vote(item)
            if result is not ABSTAIN:
                return result
        return ABSTAIN

    def mark_current(self, root):
        """Set the current flag on every undecided item below (and including) `root`.

        Items every voter abstains on are left undecided.

        Returns:
            List of the current items, in depth-first order.
        """
        marked = []
        pending = [root]
        while pending:
            item = pending.pop()
            if not item.has_current_set:
                result = self.vote(item)
                if result is not ABSTAIN:
                    item.set_current(result)
            if item.is_current:
                marked.append(item)
            pending.extend(reversed(item.children))
        return marked
