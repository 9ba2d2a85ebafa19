"""Request and route context consumed by the voters."""
from collections import deque


class Request:
    """A handled request, reduced to its routing attributes.

    The matched route name and its parameters live in `attributes` under
    `_route` and `_route_params`.
    """
    def __init__(self, route=None, route_params=None, attributes=None):
        self.attributes = dict(attributes) if attributes else {}
        if route is not None:
            self.attributes['_route'] = route
        if route_params is not None:
            self.attributes['_route_params'] = dict(route_params)

    @property
    def route(self):
        return self.attributes.get('_route')

    @property
    def route_params(self):
        params = self.attributes.get('_route_params')
        return params if params is not None else {}


class RequestStack:
    """Stack of requests; the bottom one is the main request."""
    def __init__(self):
        self._requests = deque()

    def push(self, request):
        self._requests.append(request)

    def pop(self):
        """Remove and return the current request, or None if empty."""
        if not self._requests:
            return None
        return self._requests.pop()

    @property
    def main_request(self):
        return self._requests[0] if self._requests else None

    @property
    def current_request(self):
        return self._requests[-1] if self._requests else None

    def __len__(self):
        return len(self._requests)
