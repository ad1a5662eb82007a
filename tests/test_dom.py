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
Test the DOM: elements, text nodes, fragments and the style view.
"""

### find imperative
import sys
sys.path.insert(0, '.')

import pytest

from imperative.dom import (
    Namespace, Element, Text, Fragment, create_element, create_text_node)


def check_write(node, html):
    """Return True if the node writes the html text."""
    return node.write() == html


def test_main():
    div = create_element('DIV')
    assert div.tag_name == 'div'
    assert div.namespace is Namespace.HTML
    div.set_attribute('id', 'main')
    div.set_attribute('data-count', 3)
    assert div.get_attribute('data-count') == '3'
    div.append_child(create_text_node('a < b & "c"'))
    assert check_write(div, '<div id="main" data-count="3">a &lt; b &amp; "c"</div>')

    # last write wins, order of first write is kept
    div.set_attribute('id', 'other')
    assert list(div.attributes) == ['id', 'data-count']
    div.remove_attribute('data-count')
    div.remove_attribute('not-there')
    assert not div.has_attribute('data-count')

    svg = create_element('linearGradient', Namespace.SVG)
    assert svg.tag_name == 'linearGradient'
    assert check_write(svg, '<linearGradient></linearGradient>')

    hr = create_element('hr')
    assert hr.is_void()
    assert check_write(hr, '<hr>')
    assert not create_element('hr', Namespace.SVG).is_void()

    assert check_write(Text('a\xa0b'), 'a&nbsp;b')
    p = create_element('p')
    p.set_attribute('title', 'say "hi" & go')
    assert check_write(p, '<p title="say &quot;hi&quot; &amp; go"></p>')


def test_text():
    t = Text('Hello')
    assert t.text == 'Hello'
    with pytest.raises(AttributeError):
        t.text = 'Bye'
    with pytest.raises(TypeError):
        t.append(Text('x'))
    with pytest.raises(TypeError):
        t.extend([Text('x')])
    with pytest.raises(TypeError):
        t.insert(0, Text('x'))


def test_append_child():
    frag = Fragment(Text('a'), create_element('b'))
    div = create_element('div')
    assert div.append_child(frag) is frag
    assert len(frag) == 0
    assert len(div) == 2
    assert all(n.parent is div for n in div)

    # appending an attached node moves it
    p = create_element('p')
    b = div[1]
    p.append_child(b)
    assert b.parent is p
    assert check_write(div, '<div>a</div>')
    assert check_write(p, '<p><b></b></p>')
    assert div.text_content() == 'a'


def test_equals():
    def make():
        div = create_element('div')
        div.set_attribute('class', 'x')
        div.append_child(Text('Hi'))
        div.properties['onclick'] = lambda: None
        return div
    a, b = make(), make()
    assert a.equals(b)
    b.set_attribute('class', 'y')
    assert not a.equals(b)
    c = a.copy()
    assert a.equals(c)
    assert c.properties == {}
    assert not a.equals(create_element('div', Namespace.SVG))


def test_style():
    div = create_element('div')
    style = div.style
    style['fontFamily'] = 'sans-serif'
    style['z-index'] = 1
    style['noSuchProperty'] = 'x'
    style.set_property('--my-variable', 0)
    style.set_property('no-such-property', 'x')
    assert div.get_attribute('style') == 'font-family: sans-serif; z-index: 1; --my-variable: 0;'
    assert 'fontFamily' in style
    assert '--my-variable' not in style
    assert style['font-family'] == 'sans-serif'
    assert style.get_property_value('--my-variable') == '0'

    del style['zIndex']
    assert style.remove_property('--my-variable') == '0'
    assert style.css_text == 'font-family: sans-serif;'
    style['fontFamily'] = None
    assert style.css_text == ''

    style.css_text = 'color: red; --x: 1'
    assert style['color'] == 'red'
    style['cssFloat'] = 'left'
    assert div.get_attribute('style') == 'color: red; --x: 1; float: left;'


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
