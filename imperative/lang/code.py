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
Language and transformation definition for builder code.

This reads the code :func:`imperative.translate.translate` generates, and
builds the tree again using the element factories::

    >>> from parce.transform import transform_text
    >>> from imperative.lang.code import Code
    >>> transform_text(Code.root, 'HTML.p({id: "intro"}, "Hello ", HTML.b("World"))').write()
    '<p id="intro">Hello <b>World</b></p>'

Only the subset of the language is understood that the translator writes:
factory calls, string literals and attribute bags with string, number and
boolean values. Other text is skipped.

"""

import json
import re

import parce.action as a
from parce import Language, lexicon
from parce.transform import Transform

from imperative import build, factory
from imperative.dom.element import Fragment


class Code(Language):
    """Builder code language definition."""
    @lexicon
    def root(cls):
        yield from cls.common()

    @classmethod
    def common(cls):
        """Yield the rules for function calls, strings and attribute bags."""
        yield (r'(?:HTML|SVG)\s*(?:\.\s*[A-Za-z_$][\w$]*|\[\s*"(?:[^"\\]|\\.)*"\s*\])\s*\(',
               a.Name.Function, cls.call)
        yield r'"(?:[^"\\\n]|\\.)*"', a.String
        yield r'`(?:[^`\\]|\\[\s\S])*`', a.String.Template
        yield r'\{', a.Bracket.Start, cls.attributes
        yield r',', a.Separator

    @lexicon
    def call(cls):
        """The arguments of a factory call."""
        yield r'\)', a.Delimiter, -1
        yield from cls.common()

    @lexicon
    def attributes(cls):
        """An attribute bag."""
        yield r'\}', a.Bracket.End, -1
        yield r'(?:[A-Za-z_$][\w$]*|"(?:[^"\\\n]|\\.)*")(?=\s*:)', a.Name.Attribute
        yield r':', a.Delimiter
        yield r',', a.Separator
        yield r'"(?:[^"\\\n]|\\.)*"', a.String
        yield r'-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?|-?Infinity\b', a.Number
        yield r'\b(?:true|false)\b', a.Name.Constant


_head = re.compile(r'(HTML|SVG)\s*(?:\.\s*([A-Za-z_$][\w$]*)|\[\s*("(?:[^"\\]|\\.)*")\s*\])')
_template_escape = re.compile(r'\\([`$])')


def string(text):
    """Return the value of a double-quoted or backtick string literal."""
    if text.startswith('`'):
        return _template_escape.sub(r'\1', text[1:-1])
    return json.loads(text)


def builder(head):
    """Return the factory builder function for the text of a call's head."""
    m = _head.match(head)
    f = factory.HTML if m.group(1) == "HTML" else factory.SVG
    return f[m.group(2) or string(m.group(3))]


class CodeTransform(Transform):
    """Transform builder code to a :class:`~imperative.dom.element.Fragment`."""
    def root(self, items):
        return build.apply_arguments(Fragment(), self.common(items))

    def call(self, items):
        return list(self.common(items))

    def common(self, items):
        """Yield the arguments the items represent."""
        head = None
        for i in items:
            if i.is_token:
                if i.action is a.Name.Function:
                    head = i.text
                elif i.action in a.String:
                    yield string(i.text)
            elif i.name == "call":
                yield builder(head)(*i.obj)
            elif i.name == "attributes":
                yield i.obj

    def attributes(self, items):
        """Return a dictionary.

        Numbers are kept as they were written, ``true`` and ``false`` become
        booleans.

        """
        bag = {}
        key = None
        for t in items:
            if t.is_token:
                if t.action is a.Name.Attribute:
                    key = string(t.text) if t.text.startswith('"') else t.text
                elif key is not None:
                    if t.action is a.String:
                        bag[key] = string(t.text)
                    elif t.action is a.Number:
                        bag[key] = t.text
                    elif t.action is a.Name.Constant:
                        bag[key] = t.text == "true"
                    else:
                        continue
                    key = None
        return bag
