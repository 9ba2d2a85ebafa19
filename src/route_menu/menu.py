"""Menu structure and item representation."""


class MenuItem:
    """Represents a single item in the menu tree.

    The item owns its list of children, each child keeps a back-reference
    to its parent. Membership is by identity: two siblings with identical
    fields are still distinct items.
    """
    def __init__(self, parent=None, label=None, target=None, current=None,
                 extras=None, virtual=False):
        """Create a menu item.

        Args:
            parent: Optional item to attach this item to.
            label: Text (or translatable object) to display. An item
                without label is never visible.
            target: A Linkable (route), a string (direct URI) or None (no link).
            current: None while undecided, otherwise True/False.
            extras: Mapping of extra attributes, copied on construction.
            virtual: Item takes part in the tree but is never rendered.
        """
        self._parent = None
        self._children = []
        self._label = label
        self._target = target
        self._current = current
        self._extras = dict(extras) if extras else {}
        self._virtual = bool(virtual)

        if parent is not None:
            parent.add_child(self)

    def __repr__(self):
        return f"MenuItem(label={self._label!r}, children={len(self._children)})"

    @property
    def parent(self):
        return self._parent

    @property
    def label(self):
        return self._label

    @property
    def target(self):
        return self._target

    @property
    def extras(self):
        return dict(self._extras)

    @property
    def children(self):
        return list(self._children)

    @property
    def visible_children(self):
        """Direct children that are visible, in insertion order."""
        return [child for child in self._children if child.is_visible]

    @property
    def is_visible(self):
        return not self._virtual and self._label is not None

    @property
    def is_virtual(self):
        return self._virtual

    @property
    def is_current(self):
        return self._current is True

    @property
    def has_current_set(self):
        return self._current is not None

    def set_current(self, current):
        self._current = bool(current)
        return self

    def set_extra(self, name, value):
        self._extras[name] = value
        return self

    def get_extra(self, name, default=None):
        """Return the extra `name`, or `default` if it is missing or None."""
        value = self._extras.get(name)
        return default if value is None else value

    def set_parent(self, parent):
        """Move this item below `parent` (None makes it a root)."""
        if parent is not None:
            parent.add_child(self)
        elif self._parent is not None:
            self._parent.remove_child(self)
        return self

    def add_child(self, child):
        """Append `child`, detaching it from its previous parent first.

        Re-adding an existing child moves it to the end of the list.

        Raises:
            ValueError: if `child` is this item or one of its ancestors.
        """
        if child is self or child._is_ancestor_of(self):
            raise ValueError(f"Adding {child!r} below {self!r} would create a cycle")

        if child._parent is not None:
            child._parent.remove_child(child)

        child._parent = self
        self._children.append(child)
        return self

    def remove_child(self, child):
        """Detach `child`; unrelated items are ignored."""
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child._parent = None
                break
        return self

    def clone(self):
        """Deep clone this subtree.

        The clone is a new root: its parent link is dropped. Every child is
        cloned recursively and attached to the new item. The extras mapping
        is copied, its values are shared.
        """
        cloned = MenuItem(
            label=self._label,
            target=self._target,
            current=self._current,
            extras=self._extras,
            virtual=self._virtual,
        )
        for child in self._children:
            cloned.add_child(child.clone())
        return cloned

    def __copy__(self):
        return self.clone()

    def _is_ancestor_of(self, item):
        node = item._parent
        while node is not None:
            if node is self:
                return True
            node = node._parent
        return False
