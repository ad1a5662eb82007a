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
This module defines the markup tree nodes.

There are exactly three node types, all inheriting :class:`Node`:

:class:`Element`
    has a tag name, a :class:`Namespace`, attributes and child nodes;

:class:`Text`
    has a text value and never has children;

:class:`Fragment`
    only has children. It is used to collect nodes before they are added to
    a real tree: appending a Fragment to another node moves its children.

The builder (:mod:`imperative.build`) and the translator
(:mod:`imperative.translate`) handle exactly these three types.

Use :func:`create_element` and :func:`create_text_node` to create nodes,
and :meth:`Node.append_child` to add them to a tree::

    >>> from imperative.dom.element import create_element, create_text_node
    >>> p = create_element('p')
    >>> p.set_attribute('id', 'intro')
    >>> p.append_child(create_text_node('Hello & welcome'))
    <Text 'Hello & welcome'>
    >>> p.write()
    '<p id="intro">Hello &amp; welcome</p>'

"""

import enum
import html
import reprlib

from .. import node
from .names import void_elements
from .style import Style


class Namespace(enum.Enum):
    """The namespace of an element; the value is the namespace URI."""
    HTML = "http://www.w3.org/1999/xhtml"
    SVG = "http://www.w3.org/2000/svg"


class Node(node.Node):
    """Base class for the markup nodes."""
    __slots__ = ()

    def append_child(self, child):
        """Append a node and return it.

        If the child is a :class:`Fragment`, its children are moved to this
        node and the fragment is returned empty. If the child already has a
        parent, it is removed from it first.

        """
        if isinstance(child, Fragment):
            self.extend(child.take())
        else:
            parent = child.parent
            if parent is not None:
                parent.remove(child)
            self.append(child)
        return child

    def write(self):
        """Return the markup text of this node and its children."""
        return ''.join(n.write() for n in self)

    def text_content(self):
        """Return the concatenated text of all descendant Text nodes."""
        return ''.join(n.text for n in self // Text)


class Element(Node):
    """An element, with a tag name, a namespace, attributes and children.

    The ``attributes`` dictionary keeps the attributes in the order they were
    first set. The ``properties`` dictionary holds values that are not
    attributes, like callbacks.

    """
    __slots__ = ('tag_name', 'namespace', 'attributes', 'properties')

    def __init__(self, tag_name, namespace=Namespace.HTML, *children):
        self.tag_name = tag_name
        self.namespace = namespace
        self.attributes = {}
        self.properties = {}
        super().__init__(*children)

    def __repr__(self):
        c = " ({} child{})".format(len(self), '' if len(self) == 1 else 'ren') if len(self) else ""
        return '<{} {}{}>'.format(self.namespace.name, self.tag_name, c)

    def copy(self, with_children=True):
        """Copy the element with its attributes (properties are not copied)."""
        children = (n.copy() for n in self) if with_children else ()
        copy = type(self)(self.tag_name, self.namespace, *children)
        copy.attributes.update(self.attributes)
        return copy

    def body_equals(self, other):
        """Compare tag name, namespace and attributes."""
        return self.tag_name == other.tag_name \
            and self.namespace is other.namespace \
            and self.attributes == other.attributes

    def get_attribute(self, name):
        """Return the value of the named attribute, or None."""
        return self.attributes.get(name)

    def set_attribute(self, name, value):
        """Set the named attribute to the string value."""
        self.attributes[name] = str(value)

    def remove_attribute(self, name):
        """Remove the named attribute, if present."""
        self.attributes.pop(name, None)

    def has_attribute(self, name):
        """Return True if the named attribute is present."""
        return name in self.attributes

    @property
    def style(self):
        """A :class:`~.style.Style` view on the ``style`` attribute."""
        return Style(self)

    def is_void(self):
        """Return True for HTML elements that never have content."""
        return self.namespace is Namespace.HTML and self.tag_name in void_elements

    def write(self):
        """Return the markup text of this element, like a browser's outerHTML."""
        attrs = ''.join(' {}="{}"'.format(name, escape_attribute(value))
                        for name, value in self.attributes.items())
        start = '<{}{}>'.format(self.tag_name, attrs)
        if self.is_void():
            return start
        return '{}{}</{}>'.format(start, super().write(), self.tag_name)


class Text(Node):
    """A text node. The ``text`` is read-only."""
    __slots__ = ('_text',)

    def __init__(self, text):
        self._text = text
        super().__init__()

    def __repr__(self):
        return '<Text {}>'.format(reprlib.repr(self._text))

    @property
    def text(self):
        """The text value."""
        return self._text

    def copy(self, with_children=True):
        return type(self)(self._text)

    def body_equals(self, other):
        """Compare the text values."""
        return self._text == other._text

    def append(self, node):
        raise TypeError("a Text node can't have children")

    def extend(self, nodes):
        raise TypeError("a Text node can't have children")

    def insert(self, index, node):
        raise TypeError("a Text node can't have children")

    def write(self):
        return html.escape(self._text, False).replace('\xa0', '&nbsp;')


class Fragment(Node):
    """A container for nodes that are to be added to a real tree."""
    __slots__ = ()


def escape_attribute(value):
    """Escape an attribute value for writing between double quotes."""
    return value.replace('&', '&amp;').replace('"', '&quot;').replace('\xa0', '&nbsp;')


def create_element(tag_name, namespace=Namespace.HTML):
    """Return a new :class:`Element`.

    HTML tag names are lowercased, SVG tag names are kept as they are.

    """
    if namespace is Namespace.HTML:
        tag_name = tag_name.lower()
    return Element(tag_name, namespace)


def create_text_node(text):
    """Return a new :class:`Text` node."""
    return Text(text)
