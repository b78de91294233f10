# -*- coding: utf-8 -*-
#
# This file is part of `scoretree`, a library for algebraic music scores
#
# Copyright © 2019-2021 by Wilbert Berendsen <info@wilbertberendsen.nl>
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
Immutable named attributes for the leaf nodes of a score.

The :class:`AttributeStore` mixin gives a class a read-only mapping of
attributes. Changing an attribute never modifies the object, but returns a
copy with the new value. Example::

    >>> from scoretree import note
    >>> n = note(60, 1, {'dynamic': 'mf'})
    >>> n.dynamic
    'mf'
    >>> n.accent is None        # unset attributes read as None
    True
    >>> n2 = n.update('dynamic', 'ff')
    >>> n2.dynamic, n.dynamic
    ('ff', 'mf')
    >>> n.attr('dynamic', func=str.upper).dynamic
    'MF'

Attributes are accessed as Python attributes, but real methods and fields of
the object always take precedence, and names starting with an underscore are
never looked up in the attributes. Use :meth:`~AttributeStore.read` or
:meth:`~AttributeStore.attr` to access attributes whose name is not a valid
Python identifier or clashes with a method name.

"""

import copy
import types


class UnsupportedOperation(AttributeError):
    """Raised when the generic attribute accessor is called with a
    combination of arguments it does not support."""


class AttributeStore:
    """Mixin class adding an immutable mapping of named attributes.

    Call :meth:`_init_attributes` in the constructor of the class inheriting
    this mixin.

    """
    def _init_attributes(self, attributes=None):
        self._attributes = types.MappingProxyType(dict(attributes or ()))

    def _with_attributes(self, attributes):
        """Return a shallow copy with the attributes replaced."""
        obj = copy.copy(self)
        obj._init_attributes(attributes)
        return obj

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError("{} object has no attribute {}".format(
                type(self).__name__, repr(name)))
        return self._attributes.get(name)

    @property
    def attributes(self):
        """A read-only mapping of the attributes."""
        return self._attributes

    def read(self, key):
        """Return the value of attribute ``key``, or None if not set."""
        return self._attributes.get(key)

    def update(self, key, value):
        """Return a copy where attribute ``key`` is set to ``value``."""
        d = dict(self._attributes)
        d[key] = value
        return self._with_attributes(d)

    def mutate_with(self, key, func):
        """Return a copy where attribute ``key`` is replaced by the result of
        ``func(value)``.

        If the attribute is not set, returns the object itself, and ``func``
        is not called. This way unknown attributes never silently appear.

        """
        if key not in self._attributes:
            return self
        return self.update(key, func(self._attributes[key]))

    def inherit(self, attributes):
        """Return a copy with the attributes from the ``attributes`` mapping
        added that we do not define ourselves.

        Returns the object itself if nothing would be added.

        """
        missing = {key: value for key, value in attributes.items()
                        if key not in self._attributes}
        if not missing:
            return self
        missing.update(self._attributes)
        return self._with_attributes(missing)

    def attr(self, key, *args, func=None):
        """Generic attribute accessor.

        * ``attr(key)`` returns the value (None if not set);
        * ``attr(key, value)`` returns a copy with the new value;
        * ``attr(key, func=f)`` returns a copy with the value replaced by
          ``f(value)``, or the object itself if the attribute is not set.

        Any other combination raises :class:`UnsupportedOperation`.

        """
        if func is None:
            if not args:
                return self.read(key)
            elif len(args) == 1:
                return self.update(key, args[0])
        elif not args:
            return self.mutate_with(key, func)
        raise UnsupportedOperation(
            "unsupported arguments for attribute {}: {} positional, func={}".format(
                repr(key), len(args), repr(func)))

