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
Known element names.

These tuples populate the registries of the element factories in
:mod:`imperative.factory`. The strict factories only know these names.

"""


html_tag_names = tuple("""
    a abbr address area article aside audio b base bdi bdo blockquote br
    button canvas caption cite code col colgroup datalist dd del details dfn
    dialog div dl dt em embed fieldset figcaption figure footer form h1 h2 h3
    h4 h5 h6 header hr i iframe img input ins kbd label legend li link main map
    mark menu menuitem meta meter nav noscript object ol optgroup option
    output p param picture pre progress q rp rt ruby s samp script section
    select small source span strong style sub summary sup table tbody td
    template textarea tfoot th thead time title tr track u ul var video wbr
""".split())


svg_tag_names = tuple("""
    a altGlyph altGlyphDef altGlyphItem animate animateMotion animateTransform
    circle clipPath color-profile cursor defs desc discard ellipse feBlend
    feColorMatrix feComponentTransfer feComposite feConvolveMatrix
    feDiffuseLighting feDisplacementMap feDistantLight feDropShadow feFlood
    feFuncA feFuncB feFuncG feFuncR feGaussianBlur feImage feMerge
    feMergeNode feMorphology feOffset fePointLight feSpecularLighting
    feSpotLight feTile feTurbulence filter font font-face font-face-format
    font-face-name font-face-src font-face-uri foreignObject g glyph glyphRef
    hkern image line linearGradient marker mask metadata missing-glyph mpath
    path pattern polygon polyline radialGradient rect script set stop style
    svg switch symbol text textPath title tref tspan use view vkern
""".split())


#: HTML elements that never have content and are written without end tag.
void_elements = frozenset("""
    area base br col embed hr img input link meta param source track wbr
""".split())
