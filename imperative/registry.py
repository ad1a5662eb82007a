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
Registry of the language definitions bundled with :mod:`imperative`.

When adding languages to :mod:`imperative.lang` please also add a
registration here::

    >>> from imperative import registry
    >>> registry.find("html")
    Html.root
    >>> registry.find(filename="page.js")
    Code.root

"""

__all__ = ['find', 'register']


import parce.registry


registry = parce.registry.Registry()


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Get the root lexicon for a bundled language.

    The ``name`` is looked up by name or alias. Without a name, the
    language is suggested based on ``filename``, ``mimetype`` and
    ``contents``. Returns None if no language is found.

    """
    if name:
        lexicon_name = registry.find(name)
    else:
        for lexicon_name in registry.suggest(filename, mimetype, contents):
            break
        else:
            lexicon_name = None
    if lexicon_name:
        return parce.registry.root_lexicon(lexicon_name)


def register(lexicon_name, *,
    name = None,
    desc = None,
    aliases = (),
    filenames = (),
    mimetypes = (),
    guesses = (),
):
    """Register a root lexicon name with specified properties.

    See for an explanation of all the arguments
    :meth:`parce.registry.Registry.register`.

    """
    registry.register(
        lexicon_name, name = name, desc = desc, aliases = list(aliases),
        filenames = list(filenames), mimetypes = list(mimetypes),
        guesses = list(guesses))



## register bundled languages here
register("imperative.lang.html.Html.root",
    name = "HTML",
    desc = "HTML markup, read into imperative.dom nodes",
    aliases = ["html", "xhtml"],
    filenames = [("*.html", 1), ("*.htm", 1), ("*.xhtml", 0.8)],
    mimetypes = [("text/html", 1), ("application/xhtml+xml", 0.8)],
    guesses = [(r'\A\s*<(?:!doctype\s+html|html)\b', 0.9)],
)

register("imperative.lang.html.Html.svg",
    name = "SVG",
    desc = "SVG markup, read into imperative.dom nodes",
    aliases = ["svg"],
    filenames = [("*.svg", 1)],
    mimetypes = [("image/svg+xml", 1)],
)

register("imperative.lang.code.Code.root",
    name = "Builder code",
    desc = "Code calling the HTML and SVG element factories",
    aliases = ["code", "imperative"],
    filenames = [("*.js", 0.5)],
    guesses = [(r'\A\s*(?:HTML|SVG)\s*[.\[]', 0.9)],
)
