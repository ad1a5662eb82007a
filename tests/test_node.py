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
Test the node module.
"""

### find imperative
import sys
sys.path.insert(0, '.')

import io

import pytest

from imperative.node import Node


class N1(Node):
    pass


class N2(Node):
    pass


class N3(Node):
    pass


class M1(N1):
    pass


class M2(N2):
    pass


class M3(N3):
    pass


def make_tree():
    return \
    N1(
        N2(
            N3(),
            M3(),
            N2(),
            M1(),
        ),
        N1(
            M2(),
        ),
    )


def check_parents(tree):
    """Every child's parent is the node containing it."""
    for node in tree.descendants():
        assert node in node.parent


def test_main():
    tree = make_tree()
    check_parents(tree)
    assert next(tree//M3) is tree[0][1]
    assert len(list(tree/N2)) == 1
    assert sum(1 for _ in tree//N2) == 3     # M2 inherits from N2 :-)
    assert tree[1][0].root() is tree
    assert tree[0][2].depth() == 2
    assert list(tree[1][0].ancestors()) == [tree[1], tree]
    assert tree[0][3].is_last()
    assert tree.is_root()

    tree2 = tree.copy()
    check_parents(tree2)
    assert tree.equals(tree2)
    assert tree2[0] is not tree[0]
    tree2[0][3] = N1()
    assert not tree.equals(tree2)


def test_mutation():
    tree = make_tree()
    node = tree[0][0]
    tree[0].remove(node)
    assert node.parent is None
    assert len(tree[0]) == 3

    nodes = tree[0].take(1)
    assert len(nodes) == 2
    assert all(n.parent is None for n in nodes)
    assert len(tree[0]) == 1

    new = N3()
    tree[0][0].replace_with(new, M3())
    assert new.parent is tree[0]
    assert len(tree[0]) == 2
    check_parents(tree)

    with pytest.raises(ValueError):
        tree.replace_with(N1())


def test_identity():
    a, b = N1(), N1()
    assert a.equals(b)
    assert a != b
    tree = N2(a, b)
    assert tree.index(b) == 1
    assert len({a, b}) == 2


def test_dump():
    tree = N1(N2(N3()), M1())
    f = io.StringIO()
    tree.dump(f)
    assert f.getvalue() == (
        "<N1 (2 children)>\n"
        " ├╴<N2 (1 child)>\n"
        " │  ╰╴<N3 (0 children)>\n"
        " ╰╴<M1 (0 children)>\n"
    )


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
