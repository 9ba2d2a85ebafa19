"""Route reference used as a menu item target."""


class Linkable:
    """A route name plus the parameters needed to generate its URL."""
    def __init__(self, route, parameters=None):
        self.route = route
        self.parameters = dict(parameters) if parameters else {}

    def __eq__(self, other):
        if not isinstance(other, Linkable):
            return NotImplemented
        return self.route == other.route and self.parameters == other.parameters

    def __repr__(self):
        return f"Linkable({self.route!r}, {self.parameters!r})"
