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
Meta-information about the imperative package.
"""

#: The version as a tuple of integers.
version = (0, 1, 0)

#: The version as a string.
version_string = "{}.{}.{}".format(*version)

#: The package name.
name = "imperative"

#: A short description.
description = "Build markup trees from arbitrary arguments and translate markup to builder code"

#: The maintainer.
maintainer = "Wilbert Berendsen"

#: The maintainer's email address.
maintainer_email = "info@wilbertberendsen.nl"

#: The license.
license = "GPL v3"
