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
Test the element factories.
"""

### find imperative
import sys
sys.path.insert(0, '.')

import pytest

from imperative.dom import Namespace, Fragment
from imperative.factory import (
    HTML, SVG, StrictHTML, StrictSVG, ElementFactory, register, namespace,
    html_tag_name, svg_tag_name, attribute_name)


def check_output(element, html):
    """Return True if the element writes the html text."""
    return element.write() == html


def test_main():
    assert check_output(HTML.div("Hello world!"), '<div>Hello world!</div>')
    assert check_output(HTML.fakeelement("Hello world!"), '<fakeelement>Hello world!</fakeelement>')
    assert check_output(HTML.myElement("Hello world!"), '<my-element>Hello world!</my-element>')
    assert check_output(HTML.my_element("Hello world!"), '<my-element>Hello world!</my-element>')
    assert check_output(HTML.MyElement("Hello world!"), '<my-element>Hello world!</my-element>')
    assert check_output(HTML["var"](), '<var></var>')

    assert check_output(StrictHTML.div(), '<div></div>')
    assert 'div' in StrictHTML
    assert 'fakeelement' not in StrictHTML
    for name in ('fakeelement', 'myElement', 'my_element'):
        with pytest.raises(AttributeError):
            getattr(StrictHTML, name)
    with pytest.raises(KeyError):
        StrictHTML['my-element']

    assert check_output(
        SVG.svg({'viewBox': "0 0 1 1"}, SVG.circle({'cx': 0, 'cy': 0, 'r': 1, 'fill': "black"})),
        '<svg viewBox="0 0 1 1"><circle cx="0" cy="0" r="1" fill="black"></circle></svg>')
    assert check_output(SVG.linearGradient(), '<linearGradient></linearGradient>')
    assert check_output(SVG["color-profile"](), '<color-profile></color-profile>')
    assert check_output(SVG.color_profile("Hello World!"), '<color-profile>Hello World!</color-profile>')
    assert check_output(SVG.fakeelement(), '<fakeelement></fakeelement>')
    assert check_output(StrictSVG.color_profile("Hello World!"), '<color-profile>Hello World!</color-profile>')
    with pytest.raises(AttributeError):
        StrictSVG.fakeelement

    assert check_output(
        SVG.svg(
            SVG.defs(
                SVG.linearGradient({'id': "myGradient"},
                    SVG.stop({'offset': "0%", 'stop-color': "white"}),
                    SVG.stop({'offset': "100%", 'stop-color': "black"}),
                ),
            ),
            SVG.circle({'cx': 5, 'cy': 5, 'r': 4, 'fill': "url('#myGradient')"}),
        ),
        '<svg>'
            '<defs>'
                '<linearGradient id="myGradient">'
                    '<stop offset="0%" stop-color="white"></stop>'
                    '<stop offset="100%" stop-color="black"></stop>'
                '</linearGradient>'
            '</defs>'
            '<circle cx="5" cy="5" r="4" fill="url(\'#myGradient\')"></circle>'
        '</svg>')


def test_namespaces():
    assert HTML.div().namespace is Namespace.HTML
    assert SVG.circle().namespace is Namespace.SVG
    assert HTML("<div></div>")[0].namespace is Namespace.HTML
    assert SVG("<circle/>")[0].namespace is Namespace.SVG
    assert Namespace.HTML.value == "http://www.w3.org/1999/xhtml"
    assert Namespace.SVG.value == "http://www.w3.org/2000/svg"


def test_parse():
    frag = HTML("<p id='intro'>Hello World!</p><hr>")
    assert isinstance(frag, Fragment)
    assert check_output(frag, '<p id="intro">Hello World!</p><hr>')
    assert check_output(
        SVG("<svg viewBox='0 0 1 1'><circle cx='0' cy='0' r='1' fill='black'></circle></svg><svg/>"),
        '<svg viewBox="0 0 1 1"><circle cx="0" cy="0" r="1" fill="black"></circle></svg><svg></svg>')
    # multiple arguments are joined with a comma
    assert check_output(HTML("<b>", 1, "</b>"), '<b>,1,</b>')


def test_keywords():
    assert check_output(
        HTML.label("Name", for_="name", data_role="caption"),
        '<label for="name" data-role="caption">Name</label>')
    # keywords are applied before the positional arguments
    assert check_output(HTML.div({'id': "b"}, id="a"), '<div id="b"></div>')
    assert check_output(HTML.input(class_=["a", "b"], disabled=True), '<input class="a b" disabled="">')


def test_resolvers():
    assert html_tag_name('myElement') == 'my-element'
    assert html_tag_name('MyElement') == 'my-element'
    assert html_tag_name('my_element') == 'my-element'
    assert svg_tag_name('font_face_src') == 'font-face-src'
    assert attribute_name('class_') == 'class'
    assert attribute_name('aria_label') == 'aria-label'


def test_custom_factory():
    warnings = []
    f = ElementFactory(Namespace.HTML, ('x-card',), warn=warnings.append)
    assert check_output(f.x_card(), '<x-card></x-card>')
    register(f, 'x-panel', 'panel')
    assert check_output(f.panel({'class': 0}), '<x-panel></x-panel>')
    assert warnings == ['Invalid class value "0" on x-panel element.']
    with pytest.raises(AttributeError):
        f.div
    assert f.x_card.__name__ == 'x-card'


def test_accessor_names():
    # every public name creates an element, none is taken by the factory
    for name in ('register', 'namespace', 'tag_name', 'builder'):
        assert check_output(getattr(HTML, name)(), '<{0}></{0}>'.format(name.replace('_', '-')))
        assert name in HTML
    assert namespace(HTML) is Namespace.HTML
    assert namespace(StrictSVG) is Namespace.SVG
    with pytest.raises(AttributeError):
        HTML._private


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
