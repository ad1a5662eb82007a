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
This package defines a small DOM (Document Object Model) for HTML and SVG.

The DOM is a simple tree structure of :class:`~.element.Element`,
:class:`~.element.Text` and :class:`~.element.Fragment` nodes, all based on
:class:`imperative.node.Node`.

This DOM is used in two ways:

1. Building markup trees with the element factories in
   :mod:`imperative.factory`, which apply their arguments using
   :mod:`imperative.build`.

2. Reading existing HTML or SVG text with :mod:`imperative.read`, e.g. to
   translate it to builder code using :mod:`imperative.translate`.

"""

from .element import (
    Namespace, Node, Element, Text, Fragment, create_element, create_text_node)


__all__ = (
    'Namespace', 'Node', 'Element', 'Text', 'Fragment',
    'create_element', 'create_text_node',
)
