# -*- coding: utf-8 -*-
#
# This file is part of `imperative`, a library to build and translate markup trees
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
This module defines a :class:`Node` class, to build simple tree structures
based on Python lists.

The markup nodes in :mod:`imperative.dom` inherit from it. Note that because
a Node *is* a list, every node is iterable: code that accepts "anything
iterable" must check for nodes first.

"""

import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class Node(list):
    """Node implements a simple tree type, based on Python :class:`list`.

    A node can have child nodes and a :attr:`parent`. The parent is referred to
    with a weak reference, so a node tree does not contain circular references.

    Adding nodes to a node sets the parent of the nodes; removing nodes via
    :meth:`remove` or :meth:`take` unsets it.

    Two query operators are defined, both expect a Node subclass or a tuple
    of classes:

    * ``node / Class`` iterates over the children that are an instance of
      ``Class``;
    * ``node // Class`` iterates over all descendants in document order that
      are an instance of ``Class``.

    Unlike Python's list, a node always evaluates to True, even if there are
    no children, and nodes compare by identity. Use :meth:`equals` to compare
    the structure of two trees.

    """

    __slots__ = ('__weakref__', '_parent')

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        """Always True."""
        return True

    def __init__(self, *children):
        self._parent = _NO_PARENT
        if children:
            list.extend(self, children)
            for node in self:
                node._parent = weakref.ref(self)

    @property
    def parent(self):
        """The parent Node or None; uses a weak reference."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    @parent.deleter
    def parent(self):
        self._parent = _NO_PARENT

    def root(self):
        """Return the root node."""
        root = self
        for root in self.ancestors():
            pass
        return root

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Node.index and Node.remove robust."""
        return self is other

    def __ne__(self, other):
        return self is not other

    def __truediv__(self, cls):
        """Iterate over children that inherit the specified class(es)."""
        return (node for node in self if isinstance(node, cls))

    def __floordiv__(self, cls):
        """Iterate over descendants inheriting the specified class(es), in document order."""
        return (node for node in self.descendants() if isinstance(node, cls))

    def copy(self, with_children=True):
        """Return a copy of this Node.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children)

    def append(self, node):
        """Append node to this node; the parent is set to this node."""
        node._parent = weakref.ref(self)
        list.append(self, node)

    def extend(self, nodes):
        """Append nodes to this node; the parent is set to this node."""
        index = len(self)
        list.extend(self, nodes)
        for node in self[index:]:
            node._parent = weakref.ref(self)

    def insert(self, index, node):
        """Insert node in this node; the parent is set to this node."""
        node._parent = weakref.ref(self)
        list.insert(self, index, node)

    def remove(self, node):
        """Remove the node (by identity) and unset its parent."""
        list.remove(self, node)
        node._parent = _NO_PARENT

    def take(self, start=0, end=None):
        """Like :meth:`list.pop`, but takes out and returns a slice(start, end).

        The parent of the returned nodes is unset.

        """
        k = slice(start, end)
        nodes = self[k]
        del self[k]
        for node in nodes:
            node._parent = _NO_PARENT
        return nodes

    def replace_with(self, *nodes):
        """Replace this node in its parent with the specified node(s).

        Raises ValueError if called on the root node.

        """
        parent = self.parent
        if parent is None:
            raise ValueError("can't replace the root node")
        index = parent.index(self)
        parent[index:index+1] = nodes
        self._parent = _NO_PARENT

    def __setitem__(self, k, new):
        """Set self[k] to the node(s) in ``new``; the parent is set to this Node."""
        if isinstance(k, slice):
            new = tuple(new)
            for node in new:
                node._parent = weakref.ref(self)
        else:
            new._parent = weakref.ref(self)
        list.__setitem__(self, k, new)

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class, the same
        amount of children, :meth:`body_equals` returns True, and finally for
        all the children this method returns True.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def is_last(self):
        """Return True if this is the last node. Fails if no parent."""
        return self.parent[-1] is self

    def is_root(self):
        """Return True if this node has no parent."""
        return self.parent is None

    def ancestors(self):
        """Yield the parent, then the parent's parent, etcetera."""
        n = self.parent
        while n:
            yield n
            n = n.parent

    def descendants(self):
        """Iterate over all the descendants of this node, in document order."""
        stack = []
        gen = iter(self)
        while True:
            for n in gen:
                yield n
                if len(n):
                    stack.append(gen)
                    gen = iter(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def depth(self):
        """Return the number of ancestors."""
        return sum(1 for n in self.ancestors())

    def dump(self, file=None, style=None, depth=0):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        i = 2
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        prefix = []
        node = self
        for _ in range(depth):
            prefix.append(d[i + int(node.is_last())])
            node = node.parent
            i = 0
        print(''.join(reversed(prefix)) + repr(self), file=file)
        for n in self:
            n.dump(file, style, depth + 1)
