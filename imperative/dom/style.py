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
A live view on the ``style`` attribute of an element.

The :class:`Style` object does not store anything itself: it reads the
declarations from the element's ``style`` attribute and writes them back
when a property is changed. So setting the ``style`` attribute literally and
changing single properties can be mixed freely::

    >>> from imperative.dom.element import create_element
    >>> div = create_element('div')
    >>> div.style['fontFamily'] = 'sans-serif'
    >>> div.style.set_property('--my-variable', 0)
    >>> div.get_attribute('style')
    'font-family: sans-serif; --my-variable: 0;'

Only properties listed in :data:`css_properties` can be assigned directly
(using their kebab-case or camelCase name), like a browser only knows its
own properties. Custom properties (starting with ``--``) must be set using
:meth:`Style.set_property`. Unknown property names are silently ignored.

"""

import re


#: The CSS properties that can be assigned directly.
css_properties = frozenset("""
    align-content align-items align-self all animation animation-delay
    animation-direction animation-duration animation-fill-mode
    animation-iteration-count animation-name animation-play-state
    animation-timing-function appearance aspect-ratio backdrop-filter
    backface-visibility background background-attachment background-blend-mode
    background-clip background-color background-image background-origin
    background-position background-repeat background-size block-size border
    border-block border-bottom border-bottom-color border-bottom-left-radius
    border-bottom-right-radius border-bottom-style border-bottom-width
    border-collapse border-color border-image border-inline border-left
    border-left-color border-left-style border-left-width border-radius
    border-right border-right-color border-right-style border-right-width
    border-spacing border-style border-top border-top-color
    border-top-left-radius border-top-right-radius border-top-style
    border-top-width border-width bottom box-shadow box-sizing break-after
    break-before break-inside caption-side caret-color clear clip clip-path
    color column-count column-gap column-rule column-span column-width columns
    contain content counter-increment counter-reset cursor direction display
    empty-cells fill fill-opacity fill-rule filter flex flex-basis
    flex-direction flex-flow flex-grow flex-shrink flex-wrap float font
    font-family font-feature-settings font-kerning font-size font-size-adjust
    font-stretch font-style font-variant font-weight gap grid grid-area
    grid-auto-columns grid-auto-flow grid-auto-rows grid-column
    grid-column-end grid-column-start grid-row grid-row-end grid-row-start
    grid-template grid-template-areas grid-template-columns
    grid-template-rows height hyphens image-rendering inline-size inset isolation
    justify-content justify-items justify-self left letter-spacing line-height
    list-style list-style-image list-style-position list-style-type margin
    margin-block margin-bottom margin-inline margin-left margin-right
    margin-top mask max-height max-width min-height min-width mix-blend-mode
    object-fit object-position opacity order orphans outline outline-color
    outline-offset outline-style outline-width overflow overflow-wrap
    overflow-x overflow-y padding padding-block padding-bottom padding-inline
    padding-left padding-right padding-top page-break-after page-break-before
    page-break-inside perspective perspective-origin place-content
    place-items place-self pointer-events position quotes resize right
    row-gap scroll-behavior shape-rendering stop-color stop-opacity stroke
    stroke-dasharray stroke-dashoffset stroke-linecap stroke-linejoin
    stroke-miterlimit stroke-opacity stroke-width tab-size table-layout
    text-align text-align-last text-anchor text-decoration
    text-decoration-color text-decoration-line text-decoration-style
    text-indent text-overflow text-rendering text-shadow text-transform top
    touch-action transform transform-origin transform-style transition
    transition-delay transition-duration transition-property
    transition-timing-function unicode-bidi user-select vertical-align
    visibility white-space widows width will-change word-break word-spacing
    word-wrap writing-mode z-index zoom
""".split())


_uppercase = re.compile(r'[A-Z]')


def kebab_case(name):
    """Return the kebab-case CSS name for a camelCase property name.

    Names that already are kebab-case are returned unchanged. ``cssFloat``
    is the camelCase name of ``float``.

    """
    if name == 'cssFloat':
        return 'float'
    return _uppercase.sub(lambda m: '-' + m.group().lower(), name)


def parse_declarations(text):
    """Parse CSS declarations text into a list of (name, value) tuples.

    Property names are lowercased, except for custom properties.

    """
    result = []
    for declaration in text.split(';'):
        name, colon, value = declaration.partition(':')
        name = name.strip()
        if colon and name:
            if not name.startswith('--'):
                name = name.lower()
            result.append((name, value.strip()))
    return result


class Style:
    """The style declarations of an :class:`~.element.Element`.

    Item access uses property names in camelCase or kebab-case, like the
    properties of a browser's style object. Use ``in`` to check whether a
    property can be assigned directly.

    """
    __slots__ = ('_element',)

    def __init__(self, element):
        self._element = element

    def __repr__(self):
        return '<Style {!r}>'.format(self.css_text)

    @staticmethod
    def property_name(name):
        """Return the kebab-case name if ``name`` is a known CSS property, else None."""
        name = kebab_case(name)
        if name in css_properties:
            return name

    def __contains__(self, name):
        return self.property_name(name) is not None

    def declarations(self):
        """Return a dictionary with the current declarations, in order."""
        return dict(parse_declarations(self._element.get_attribute('style') or ''))

    def _write(self, declarations):
        self._element.set_attribute('style', ' '.join(
            '{}: {};'.format(name, value) for name, value in declarations.items()))

    @property
    def css_text(self):
        """The serialized declarations."""
        return self._element.get_attribute('style') or ''

    @css_text.setter
    def css_text(self, text):
        self._element.set_attribute('style', text)

    def __getitem__(self, name):
        return self.get_property_value(kebab_case(name))

    def __setitem__(self, name, value):
        """Assign a known property; unknown names are ignored."""
        prop = self.property_name(name)
        if prop:
            self._set(prop, value)

    def __delitem__(self, name):
        self.remove_property(kebab_case(name))

    def get_property_value(self, name):
        """Return the value of the named property, or the empty string."""
        return self.declarations().get(name, '')

    def set_property(self, name, value):
        """Set a property by its CSS name; custom properties (``--name``) are
        also accepted.

        Setting a property to None or the empty string removes it.

        """
        if name.startswith('--'):
            self._set(name, value)
        elif name.lower() in css_properties:
            self._set(name.lower(), value)

    def remove_property(self, name):
        """Remove the named property and return its former value."""
        declarations = self.declarations()
        value = declarations.pop(name, '')
        if value:
            self._write(declarations)
        return value

    def _set(self, name, value):
        value = '' if value is None else str(value).strip()
        declarations = self.declarations()
        if value:
            declarations[name] = value
        elif name in declarations:
            del declarations[name]
        else:
            return
        self._write(declarations)
