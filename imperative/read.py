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
Simple helper functions to build markup trees reading from text.

HTML and SVG text is read using :class:`~.lang.html.Html`, builder code
(as written by :func:`~.translate.translate`) using
:class:`~.lang.code.Code`. All functions return new nodes that have no
parent::

    >>> from imperative import read
    >>> frag = read.html_fragment('<p>Hello <b>World</b></p><hr>')
    >>> frag.dump()
    <Fragment (2 children)>
     ├╴<HTML p (2 children)>
     │  ├╴<Text 'Hello '>
     │  ╰╴<HTML b (1 child)>
     │     ╰╴<Text 'World'>
     ╰╴<HTML hr>
    >>> read.code('HTML.p("Hello ", HTML.b("World"))').write()
    '<p>Hello <b>World</b></p>'

"""


from parce.transform import Transformer

from . import registry
from .lang.code import Code
from .lang.html import Html


_transformer = Transformer()


def html_fragment(text):
    """Return a :class:`~.dom.element.Fragment` with the nodes read from
    the HTML text.

    An ``<svg>`` element and its descendants get the SVG namespace.

    """
    return _transformer.transform_text(Html.root, text)


def html(text):
    """Return the first node read from the HTML text, or None."""
    for node in html_fragment(text).take(0, 1):
        return node


def svg_fragment(text):
    """Return a Fragment with the nodes read from the SVG text.

    Elements get the SVG namespace, except for the contents of a
    ``<foreignObject>`` element, which are HTML.

    """
    return _transformer.transform_text(Html.svg, text)


def svg(text):
    """Return the first node read from the SVG text, or None."""
    for node in svg_fragment(text).take(0, 1):
        return node


def code_fragment(text):
    """Return a Fragment with the nodes built by the builder code."""
    return _transformer.transform_text(Code.root, text)


def code(text):
    """Return the first node built by the builder code, or None."""
    for node in code_fragment(text).take(0, 1):
        return node


def fragment(text, language="html"):
    """Return a Fragment read from the text in the named language.

    The ``language`` is looked up in :mod:`imperative.registry`, e.g.
    ``"html"``, ``"svg"`` or ``"code"``. Raises ValueError for an unknown
    language.

    """
    lexicon = registry.find(language)
    if lexicon is None:
        raise ValueError("unknown language: {}".format(language))
    return _transformer.transform_text(lexicon, text)
