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
The element factories :data:`HTML` and :data:`SVG`.

Accessing any attribute on a factory returns a function that creates an
element with that name and applies its arguments using
:func:`~imperative.build.apply_arguments`::

    >>> from imperative.factory import HTML, SVG
    >>> HTML.div({'class': 'note'}, HTML.p("Intro"), HTML.hr, HTML.p("Body")).write()
    '<div class="note"><p>Intro</p><hr><p>Body</p></div>'

Keyword arguments are applied as attributes before the other arguments. A
trailing underscore is removed from keyword names, and other underscores
become hyphens::

    >>> HTML.label("Name", for_="name", data_role="caption").write()
    '<label for="name" data-role="caption">Name</label>'

The attribute name is translated to a tag name. First the registry of the
factory is consulted, which contains all names in :mod:`.dom.names`. For
other names a resolver function is used: for HTML, camelCase and snake_case
become kebab-case (``HTML.myElement`` and ``HTML.my_element`` both create
``<my-element>``), and for SVG snake_case becomes kebab-case. Item access
uses the same translation, so names that are not valid Python identifiers
can be used as well: ``HTML["var"]``, ``SVG["color-profile"]``.

The strict factories :data:`StrictHTML` and :data:`StrictSVG` have no
resolver, they only know the names in the registry.

Calling a factory parses its arguments as markup text and returns a
:class:`~imperative.dom.element.Fragment`::

    >>> HTML("<p id='intro'>Hello World!</p><hr>").write()
    '<p id="intro">Hello World!</p><hr>'

"""

import re

from . import build
from .dom.element import Namespace, create_element
from .dom.names import html_tag_names, svg_tag_names


_uppercase = re.compile(r'[A-Z]')


def html_tag_name(name):
    """Return the HTML tag name for the (camelCase or snake_case) name."""
    name = _uppercase.sub(lambda m: '-' + m.group().lower(), name)
    if name.startswith('-'):
        name = name[1:]
    return name.replace('_', '-')


def svg_tag_name(name):
    """Return the SVG tag name for the (snake_case) name."""
    return name.replace('_', '-')


def attribute_name(keyword):
    """Return the attribute name for a Python keyword argument name."""
    if keyword.endswith('_'):
        keyword = keyword[:-1]
    return keyword.replace('_', '-')


class ElementFactory:
    """Creates elements in a namespace.

    ``tag_names`` populates the registry. For every tag name containing a
    hyphen, the snake_case name is registered as well. More names can be
    added using :func:`register`.

    ``resolver``, if given, is called with names that are not in the
    registry, and should return a tag name, or None if the name can't be
    resolved.

    ``warn`` is the diagnostics sink passed to
    :func:`~imperative.build.apply_arguments`.

    Every public attribute name creates an element, so the factory has no
    public methods; use :func:`register`, :func:`namespace` and the ``in``
    operator instead.

    """
    def __init__(self, namespace, tag_names=(), resolver=None, warn=build.warn):
        self._namespace = namespace
        self._registry = {}
        self._resolver = resolver
        self._warn = warn
        for tag_name in tag_names:
            register(self, tag_name)

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, self._namespace.name)

    def _tag_name(self, name):
        """Return the tag name for the accessor name, or None."""
        try:
            return self._registry[name]
        except KeyError:
            if self._resolver:
                return self._resolver(name)

    def _builder(self, tag_name):
        """Return a function creating an element with the tag name."""
        namespace = self._namespace
        warn = self._warn
        def builder(*args, **attrs):
            element = create_element(tag_name, namespace)
            if attrs:
                build.merge_attributes(element,
                    {attribute_name(key): value for key, value in attrs.items()}, warn)
            return build.apply_arguments(element, args, warn)
        builder.__name__ = builder.__qualname__ = tag_name
        return builder

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        tag_name = self._tag_name(name)
        if tag_name is None:
            raise AttributeError("unknown {} element: {}".format(self._namespace.name, name))
        return self._builder(tag_name)

    def __getitem__(self, name):
        tag_name = self._tag_name(name)
        if tag_name is None:
            raise KeyError(name)
        return self._builder(tag_name)

    def __contains__(self, name):
        return self._tag_name(name) is not None

    def __call__(self, *markup):
        """Parse the markup text and return a Fragment."""
        from . import read
        text = ",".join(map(str, markup))
        if self._namespace is Namespace.SVG:
            return read.svg_fragment(text)
        return read.html_fragment(text)


def register(factory, tag_name, *names):
    """Register a tag name in the factory, with the specified extra accessor names.

    The tag name itself and, if it contains a hyphen, its snake_case
    variant are always registered.

    """
    names = {tag_name, tag_name.replace('-', '_')}.union(names)
    for name in names:
        factory._registry[name] = tag_name


def namespace(factory):
    """Return the :class:`~imperative.dom.element.Namespace` of the elements
    the factory creates."""
    return factory._namespace


#: Creates HTML elements, also with unknown (custom) names.
HTML = ElementFactory(Namespace.HTML, html_tag_names, html_tag_name)

#: Creates SVG elements, also with unknown names.
SVG = ElementFactory(Namespace.SVG, svg_tag_names, svg_tag_name)

#: Creates only the known HTML elements.
StrictHTML = ElementFactory(Namespace.HTML, html_tag_names)

#: Creates only the known SVG elements.
StrictSVG = ElementFactory(Namespace.SVG, svg_tag_names)
