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
The imperative module.

Build HTML and SVG trees from arbitrary arguments using the element
factories, and translate existing markup to the code that builds it::

    >>> from imperative import HTML, translate
    >>> HTML.ul([HTML.li(name) for name in ("one", "two")]).write()
    '<ul><li>one</li><li>two</li></ul>'
    >>> print(translate('<p>Hi</p>'))
    HTML.p("Hi")

"""

from .pkginfo import version, version_string
from .build import apply_to_element, replace_with
from .factory import HTML, SVG, StrictHTML, StrictSVG
from .translate import translate


__all__ = (
    'HTML', 'SVG', 'StrictHTML', 'StrictSVG',
    'apply_to_element', 'replace_with', 'translate',
    'version', 'version_string',
)
