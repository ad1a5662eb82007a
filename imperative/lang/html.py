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
Html language and transformation definition.

The language definition is deliberately simple: it only finds tags,
attributes and text. The :class:`HtmlTransform` builds the element tree from
the flat list of tags, like a browser would do for well-formed documents.
It does not implement the HTML error recovery rules (implicit end tags,
table fix-ups, raw text in ``<script>`` and ``<style>``).

"""

import html
import re

import parce.action as a
from parce import Language, lexicon, default_action
from parce.transform import Transform

from imperative.dom.element import Namespace, Fragment, Text, create_element


class Html(Language):
    """Html language definition.

    The ``root`` lexicon reads HTML, the ``svg`` lexicon reads the contents
    of an ``<svg>`` element.

    """
    @lexicon
    def root(cls):
        yield from cls.common()

    @lexicon
    def svg(cls):
        yield from cls.common()

    @classmethod
    def common(cls):
        """Yield the rules for text and tags."""
        yield r'<!--[\s\S]*?(?:-->|\Z)', a.Comment
        yield r'<[!?][^>]*>?', a.Keyword      # doctype or processing instruction
        yield r'</[^\s/>]+\s*>?', a.Name.Tag.End
        yield r'<[A-Za-z][^\s/>]*', a.Name.Tag, cls.attrs
        yield default_action, a.Text

    @lexicon
    def attrs(cls):
        """The attributes of an open tag."""
        yield r'/?>', a.Delimiter, -1
        yield r'''[^\s/>"'=]+(?:\s*=\s*(?:"[^"]*"?|'[^']*'?|[^\s>]+))?''', a.Name.Attribute


_attribute = re.compile(r'''([^\s=]+)(?:\s*=\s*(?:"([^"]*)"?|'([^']*)'?|(\S+)))?''')


class HtmlTransform(Transform):
    """Transform Html to a :class:`~imperative.dom.element.Fragment`."""
    def root(self, items):
        """Process the ``root`` context."""
        return self.build(items, Namespace.HTML)

    def svg(self, items):
        """Process the ``svg`` context."""
        return self.build(items, Namespace.SVG)

    def attrs(self, items):
        """Process the ``attrs`` context.

        Returns a list of (name, value) tuples and the closing delimiter text
        (``>``, ``/>`` or the empty string if the tag is not closed).

        """
        attrs = []
        closing = ''
        for t in items:
            if t.is_token:
                if t.action is a.Name.Attribute:
                    m = _attribute.match(t.text)
                    name = m.group(1)
                    value = next((v for v in m.group(2, 3, 4) if v is not None), '')
                    attrs.append((name, html.unescape(value)))
                elif t.action is a.Delimiter:
                    closing = t.text
        return attrs, closing

    def build(self, items, namespace):
        """Build a Fragment from the tags and text in the items.

        ``namespace`` is the namespace of the elements at the top level.

        """
        fragment = Fragment()
        # (node, namespace of its children)
        stack = [(fragment, namespace)]
        text = []

        def flush():
            if text:
                stack[-1][0].append(Text(html.unescape(''.join(text))))
                text.clear()

        # comments and doctypes are skipped, text around them is joined
        for i in items:
            if i.is_token:
                if i.action is a.Text:
                    text.append(i.text)
                elif i.action is a.Name.Tag:
                    flush()
                    self.open_tag(stack, i.text[1:])
                elif i.action is a.Name.Tag.End:
                    flush()
                    self.close_tag(stack, i.text[2:].rstrip('>').strip())
            elif i.name == "attrs":
                flush()
                attrs, closing = i.obj
                self.set_attributes(stack, attrs, closing)
        flush()
        return fragment

    def open_tag(self, stack, name):
        """Create an element and push it on the stack."""
        namespace = stack[-1][1]
        if namespace is Namespace.HTML and name.lower() == 'svg':
            namespace = Namespace.SVG
        element = create_element(name, namespace)
        stack[-1][0].append(element)
        if namespace is Namespace.SVG and name == 'foreignObject':
            stack.append((element, Namespace.HTML))
        else:
            stack.append((element, namespace))

    def set_attributes(self, stack, attrs, closing):
        """Set the attributes of the element that was opened last.

        The element is popped from the stack again if it is an HTML void
        element, or an SVG element closed with ``/>``.

        """
        element = stack[-1][0]
        for name, value in attrs:
            if element.namespace is Namespace.HTML:
                name = name.lower()
            if name not in element.attributes:
                element.set_attribute(name, value)
        if element.is_void() or (closing == '/>' and element.namespace is Namespace.SVG):
            stack.pop()

    def close_tag(self, stack, name):
        """Pop the stack upto and including the element with the name.

        Nothing happens if there is no such element.

        """
        name = name.lower()
        for index in range(len(stack) - 1, 0, -1):
            if stack[index][0].tag_name.lower() == name:
                del stack[index:]
                return
