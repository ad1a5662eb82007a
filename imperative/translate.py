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
Translate a markup tree to the code that would build it.

The generated code uses the ``HTML`` and ``SVG`` element factories of the
JavaScript *imperative-html* library, which the factories in
:mod:`imperative.factory` mirror, and :mod:`imperative.lang.code` can read it
back. The code is formatted as a human would: an element with a single short
text is written on one line, other contents are spread over indented lines::

    >>> from imperative.translate import translate
    >>> print(translate('<div class="container">Hello <b>Awesome</b> World!</div>', "    "))
    HTML.div({class: "container"},
        "Hello ",
        HTML.b("Awesome"),
        " World!",
    )

The exact output format is stable: the indent string, the placement of
commas and the choice of quotes do not change between versions.

"""

import collections
import decimal
import json
import math
import re

from .dom.element import Namespace, Element, Fragment, Text


#: Words that can't be used as a bare name after the dot.
RESERVED_WORDS = frozenset("""
    abstract arguments await boolean break byte case catch char class const
    continue debugger default delete do double else enum eval export extends
    false final finally float for function goto if implements import in
    instanceof int interface let long native new null package private
    protected public return short static super switch synchronized this throw
    throws transient true try typeof var void volatile while with yield
""".split())

UNRECOGNIZED = "<Unrecognized node type>"

_identifier = re.compile(r'[a-z][a-zA-Z0-9_]*\Z')
_kebab = re.compile(r'-[a-z]')
_leading_whitespace = re.compile(r'\A(?:\t|\n|  )+')
# the whitespace of the generated code's language, which excludes \x1c-\x1f
_whitespace = r'[\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]'
_trailing_whitespace = re.compile(_whitespace + r'+\Z')


#: The result of :func:`to_identifier`.
Identifier = collections.namedtuple("Identifier", "text valid")
Identifier.text.__doc__ = "The converted name."
Identifier.valid.__doc__ = "True if the name can be used after a dot."


def is_identifier(name):
    """Return True if the name needs no quotes as a key in an attribute bag."""
    return bool(_identifier.match(name))


def to_identifier(name, namespace=Namespace.HTML):
    """Convert a tag name to the name that is used after the factory name.

    HTML names are lowercased and kebab-case becomes camelCase, SVG names
    only get their hyphens replaced by underscores. Any remaining hyphens
    also become underscores. The ``valid`` field of the returned
    :class:`Identifier` tells whether the converted name can be written after
    a dot, or the tag name must be quoted between brackets.

    """
    if namespace is Namespace.HTML:
        name = _kebab.sub(lambda m: m.group()[1].upper(), name.lower())
    name = name.replace('-', '_')
    return Identifier(name, is_identifier(name) and name not in RESERVED_WORDS)


def quote(text):
    """Return the text as a double-quoted string literal."""
    return json.dumps(text, ensure_ascii=False)


def format_text(text):
    r"""Convert the text of a text node to a string literal.

    Returns None for text that only contains whitespace. Leading indentation
    is removed and trailing whitespace is collapsed to a single space. Text
    that still contains a tab or newline becomes a backtick literal, other
    text a double-quoted literal::

        >>> format_text("\n\t   Hello World!\n\t ")
        '" Hello World! "'
        >>> format_text("Hello\n\tWorld!")
        '`Hello\n\tWorld!`'

    """
    if _trailing_whitespace.match(text):
        return None
    text = _leading_whitespace.sub('', text, 1)
    text = _trailing_whitespace.sub(' ', text)
    if '\t' in text or '\n' in text:
        return '`' + text.replace('`', '\\`').replace('${', '\\${') + '`'
    return quote(text)


def number_to_string(value):
    """Return the number formatted like the generated code's language does.

    Integral values have no decimal point, very large and very small values
    use exponential notation (``1e+21``, ``1e-7``).

    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    elif math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    elif value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return format(decimal.Decimal(repr(value)).normalize(), 'f')
    mantissa, exponent = repr(value).split('e')
    if mantissa.endswith('.0'):
        mantissa = mantissa[:-2]
    return '{}e{}{}'.format(mantissa, '-' if exponent.startswith('-') else '+',
                            exponent.lstrip('+-').lstrip('0'))


def format_attribute_value(value):
    """Convert an attribute value to a literal.

    The empty string becomes ``true``, a number that is written exactly like
    the generated code would write it becomes a bare number, and anything
    else a double-quoted string literal.

    """
    if value == "":
        return "true"
    try:
        number = float(value)
    except ValueError:
        pass
    else:
        if not math.isnan(number) and number_to_string(number) == value:
            return value
    return quote(value)


def translate(node, indent="\t"):
    """Return the code that would build the node.

    The ``node`` may be an :class:`~.dom.element.Element`, a
    :class:`~.dom.element.Text` node or a :class:`~.dom.element.Fragment`,
    or a string of HTML text, which is read into a Fragment first. The
    ``indent`` string is used for each level of indentation.

    Multiple top-level nodes are separated with a comma and a newline.

    """
    if isinstance(node, str):
        from . import read
        node = read.html_fragment(node)
    result = []
    for n in (node if isinstance(node, Fragment) else (node,)):
        if isinstance(n, Text):
            text = format_text(n.text)
            if text is not None:
                result.append(text + ",\n")
        elif isinstance(n, Element):
            result.append(translate_element(n, 0, indent))
    result = "".join(result)
    if result.endswith(",\n"):
        result = result[:-2]
    return result


def translate_element(element, level, indent):
    """Return the code for the element, indented to the level.

    The code ends with a comma and a newline.

    """
    indentation = indent * level
    if element.namespace is Namespace.HTML:
        factory, tag_name = "HTML", element.tag_name.lower()
    elif element.namespace is Namespace.SVG:
        factory, tag_name = "SVG", element.tag_name
    else:
        return indentation + UNRECOGNIZED + ",\n"
    name = to_identifier(tag_name, element.namespace)
    result = [indentation, factory]
    result.append("." + name.text if name.valid else "[" + quote(tag_name) + "]")

    attributes = ["{}: {}".format(key if is_identifier(key) else quote(key),
                                  format_attribute_value(value))
                  for key, value in element.attributes.items()]

    children = []
    collapse = False
    for child in element:
        if isinstance(child, Text):
            text = format_text(child.text)
            if text is not None:
                if not attributes and len(element) == 1 and '\n' not in text:
                    children.append(text)
                    collapse = True
                else:
                    children.append(indentation + indent + text + ",\n")
        elif isinstance(child, Element):
            children.append(translate_element(child, level + 1, indent))
        else:
            children.append(indentation + indent + UNRECOGNIZED + ",\n")

    result.append("(")
    if attributes:
        result.append("{" + ", ".join(attributes) + "}")
        if children:
            result.append(",")
    if collapse:
        result.extend(children)
    elif children:
        result.append("\n")
        result.extend(children)
        result.append(indentation)
    result.append("),\n")
    return "".join(result)
