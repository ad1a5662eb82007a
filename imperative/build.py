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
Apply arbitrary arguments to an element or fragment.

This is what the element factories in :mod:`imperative.factory` do with the
arguments they are called with. Every argument is classified by
:func:`classify`, which checks its type in a fixed order (the first match
wins):

===================== ====================================================
:attr:`Kind.NODE`     a :class:`~.dom.element.Node`: appended as a child
:attr:`Kind.STRING`   a :class:`str`: appended as a Text node
:attr:`Kind.PRODUCER` a callable without arguments: called, and the
                      result is applied
:attr:`Kind.SEQUENCE` a list, tuple, range, ...: the items are applied
:attr:`Kind.ITERABLE` any other iterable (generators, sets, ...): drained,
                      and the items are applied
:attr:`Kind.BAG`      a mapping (only when applied to an Element): merged
                      as attributes, properties and style
:attr:`Kind.OTHER`    anything else (also callables that need
                      arguments): converted with :class:`str` and
                      appended as a Text node
===================== ====================================================

Because nodes are lists, the :attr:`~Kind.NODE` check must come before the
:attr:`~Kind.SEQUENCE` and :attr:`~Kind.ITERABLE` checks, otherwise an
element would be expanded into its children instead of being appended.

For example::

    >>> from imperative.dom.element import create_element
    >>> from imperative.build import apply_arguments
    >>> div = apply_arguments(create_element('div'), [
    ...     {'class': ['intro', 'wide'], 'hidden': True},
    ...     "Hello ", (s for s in ["big ", "world"]), lambda: 42])
    >>> div.write()
    '<div class="intro wide" hidden="">Hello big world42</div>'

Problems with arguments never raise an exception; instead a message is sent
to the ``warn`` callable, which by default logs a warning using the
``imperative`` logger.

"""

import collections.abc
import enum
import inspect
import logging

from .dom.element import Node, Element, Fragment, Text


logger = logging.getLogger("imperative")


def warn(message):
    """The default diagnostics sink: log the message as a warning."""
    logger.warning(message)


class Kind(enum.Enum):
    """The kind of an argument, as determined by :func:`classify`."""
    NODE = "node"
    STRING = "string"
    PRODUCER = "producer"
    SEQUENCE = "sequence"
    ITERABLE = "iterable"
    BAG = "bag"
    OTHER = "other"


_BYTES = (bytes, bytearray)


def takes_no_arguments(func):
    """Return True if the callable can be called without arguments.

    Callables whose signature can't be inspected are assumed to accept no
    arguments.

    """
    try:
        inspect.signature(func).bind()
    except TypeError:
        return False
    except ValueError:
        pass
    return True


def classify(value, target=None):
    """Return the :class:`Kind` of the argument ``value``.

    A mapping is only a :attr:`Kind.BAG` if the ``target`` it is applied to
    is an :class:`~.dom.element.Element`; otherwise it is :attr:`Kind.OTHER`.

    """
    if isinstance(value, Node):
        return Kind.NODE
    elif isinstance(value, str):
        return Kind.STRING
    elif callable(value) and takes_no_arguments(value):
        return Kind.PRODUCER
    elif isinstance(value, collections.abc.Sequence) and not isinstance(value, _BYTES):
        return Kind.SEQUENCE
    elif isinstance(value, collections.abc.Iterable) \
            and not isinstance(value, (collections.abc.Mapping,) + _BYTES):
        return Kind.ITERABLE
    elif isinstance(value, collections.abc.Mapping) and isinstance(target, Element):
        return Kind.BAG
    return Kind.OTHER


def apply_arguments(target, args, warn=warn):
    """Apply the arguments to the target Element or Fragment and return it.

    ``args`` is an iterable of arbitrary values, see the module's
    documentation. Callables are called exactly once, in argument order.

    """
    if not isinstance(target, (Element, Fragment)):
        warn("Couldn't apply to provided argument because it's not an element or fragment.")
        return target
    _apply(target, args, warn, ())
    return target


def _apply(target, args, warn, expanding):
    """Implementation of :func:`apply_arguments`.

    ``expanding`` is the tuple of ids of the containers that are currently
    being expanded, to detect self-referencing arguments.

    """
    for arg in args:
        kind = classify(arg, target)
        if kind is Kind.NODE:
            target.append_child(arg)
        elif kind is Kind.STRING:
            target.append_child(Text(arg))
        elif kind is Kind.PRODUCER:
            _apply(target, [arg()], warn, expanding)
        elif kind is Kind.SEQUENCE or kind is Kind.ITERABLE:
            if id(arg) in expanding:
                warn("Skipped {} argument that contains itself.".format(type(arg).__name__))
                continue
            _apply(target, list(arg), warn, expanding + (id(arg),))
        elif kind is Kind.BAG:
            merge_attributes(target, arg, warn)
        else:
            target.append_child(Text(str(arg)))


def merge_attributes(element, bag, warn=warn):
    """Merge the mapping ``bag`` into the element's attributes.

    The ``class`` key accepts a string or an iterable of strings, the
    ``style`` key a string or a mapping of style properties. Callable values
    are stored in the element's ``properties``, True and False add and remove
    boolean attributes; other values are converted to a string.

    """
    for key, value in bag.items():
        if key == "class":
            if isinstance(value, str):
                element.set_attribute(key, value)
            elif classify(value) in (Kind.SEQUENCE, Kind.ITERABLE):
                element.set_attribute(key, " ".join(map(str, value)))
            else:
                warn('Invalid {} value "{}" on {} element.'.format(key, value, element.tag_name))
        elif key == "style":
            if isinstance(value, collections.abc.Mapping):
                style = element.style
                for name, declaration in value.items():
                    if name in style:
                        style[name] = declaration
                    else:
                        style.set_property(name, declaration)
            else:
                element.set_attribute(key, value)
        elif callable(value):
            element.properties[key] = value
        elif isinstance(value, bool):
            if value:
                element.set_attribute(key, "")
            else:
                element.remove_attribute(key)
        else:
            element.set_attribute(key, value)


def apply_to_element(target, *args, warn=warn):
    """Apply the arguments to an existing Element or Fragment and return it.

    If the target is not an Element or Fragment, a warning is issued and the
    target is returned unchanged.

    """
    return apply_arguments(target, args, warn)


def replace_with(node, *args, warn=warn):
    """Replace the node in its parent with the nodes built from the arguments.

    The arguments are applied to a new :class:`~.dom.element.Fragment`,
    whose contents then replace the node. If the node has no parent, a
    warning is issued and nothing happens.

    """
    if not isinstance(node, Node) or node.parent is None:
        warn("Couldn't replace node because it is not attached to a parent, "
             "did you try to replace the same node more than once?")
        return
    fragment = apply_arguments(Fragment(), args, warn)
    node.replace_with(*fragment.take())
