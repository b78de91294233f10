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
Performing a score: walking the score tree while keeping track of time.

A :class:`Performer` reduces a score tree to some result value. Inherit from
it and implement four methods: :meth:`~Performer.on_note` and
:meth:`~Performer.on_silence` compute the result for the leaves, and
:meth:`~Performer.combine_seq` and :meth:`~Performer.combine_par` combine the
results of the two halves of a :class:`~.score.Seq` or :class:`~.score.Par`.
The traversal of Seq, Par and Group nodes is handled by the Performer itself.

Every node is visited with a :class:`Context`, which holds the time the node
starts at, and the attributes of the enclosing groups.

For example, a performer that lists the pitches with their start time::

    >>> from scoretree import Performer, note
    >>> class Pitches(Performer):
    ...     def on_note(self, note, context):
    ...         return [(context.time, note.pitch)]
    ...     def on_silence(self, leaf, context):
    ...         return []
    ...     def combine_seq(self, left, right):
    ...         return left + right
    ...     def combine_par(self, top, bottom):
    ...         return sorted(top + bottom)
    ...
    >>> Pitches().perform(note(60) & (note(64) | note(67)))
    [(0, 60), (1, 64), (1, 67)]

"""

import logging
import types

import parce.util

from . import score


logger = logging.getLogger(__name__)


class Context:
    """The context a score node is performed in.

    ``time`` is the time the node starts at, ``attributes`` is a mapping of
    the attributes of the enclosing :class:`~.score.Group` nodes; when groups
    are nested, the attributes of the innermost group take precedence.

    A Context is immutable; :meth:`advance` and :meth:`enter` return a new
    one.

    """
    __slots__ = ('time', 'attributes')

    def __init__(self, time=0, attributes=None):
        self.time = time    #: The current time offset.
        self.attributes = types.MappingProxyType(dict(attributes or ()))  #: The inherited attributes.

    def __repr__(self):
        return "<{} time={} attributes={}>".format(
            type(self).__name__, self.time, dict(self.attributes))

    def __eq__(self, other):
        if isinstance(other, Context):
            return self.time == other.time and dict(self.attributes) == dict(other.attributes)
        return NotImplemented

    __hash__ = None

    def advance(self, length):
        """Return a new Context, ``length`` later in time."""
        return type(self)(self.time + length, self.attributes)

    def enter(self, group):
        """Return a new Context with the attributes of the ``group`` added."""
        attributes = group.attributes
        if not attributes:
            return self
        return type(self)(self.time, {**self.attributes, **attributes})


class Performer:
    """Base class for a score performer.

    Call :meth:`perform` to reduce a score to a result. The leaves are
    handled by :meth:`on_note`, :meth:`on_silence` and :meth:`on_controller`;
    the results are combined by :meth:`combine_seq`, :meth:`combine_par` and
    :meth:`on_group`.

    The tree is walked without recursion, so the depth of the tree is not
    limited by Python's recursion limit.

    """
    def perform(self, node, context=None):
        """Perform the score ``node`` in the ``context`` and return the result.

        If no context is given, a :class:`Context` starting at time 0 is used.
        Raises TypeError if a node is not a score.

        """
        if context is None:
            context = Context()
        logger.debug("%s: performing %r at time %s", type(self).__name__, node, context.time)
        results = []
        stack = [(node, context, False)]
        while stack:
            node, context, done = stack.pop()
            if done:
                self._combine(type(node), node, context, results)
            elif isinstance(node, score.Seq):
                stack.append((node, context, True))
                stack.append((node.right, context.advance(node.left.duration), False))
                stack.append((node.left, context, False))
            elif isinstance(node, score.Par):
                stack.append((node, context, True))
                stack.append((node.bottom, context, False))
                stack.append((node.top, context, False))
            elif isinstance(node, score.Group):
                stack.append((node, context, True))
                stack.append((node.score, context.enter(node), False))
            else:
                results.append(self._leaf(type(node), node, context))
        return results.pop()

    @staticmethod
    def _dispatch_base_class(dispatch, cls, *args):
        """Call the method ``dispatch`` has for the nearest base class of ``cls``."""
        for base in cls.__mro__[1:]:
            meth = dispatch.get(base)
            if meth:
                return meth(*args)
        raise TypeError("can't perform {} object".format(cls.__name__))

    @parce.util.Dispatcher
    def _leaf(self, cls, node, context):
        return self._dispatch_base_class(self._leaf, cls, node, context)

    @_leaf(score.Note)
    def _leaf_note(self, node, context):
        return self.on_note(node, context)

    @_leaf(score.Rest)
    def _leaf_rest(self, node, context):
        return self.on_silence(node, context)

    @_leaf(score.Controller)
    def _leaf_controller(self, node, context):
        return self.on_controller(node, context)

    @parce.util.Dispatcher
    def _combine(self, cls, node, context, results):
        return self._dispatch_base_class(self._combine, cls, node, context, results)

    @_combine(score.Seq)
    def _combine_seq(self, node, context, results):
        right = results.pop()
        results.append(self.combine_seq(results.pop(), right))

    @_combine(score.Par)
    def _combine_par(self, node, context, results):
        bottom = results.pop()
        results.append(self.combine_par(results.pop(), bottom))

    @_combine(score.Group)
    def _combine_group(self, node, context, results):
        results.append(self.on_group(node, results.pop(), context))

    def on_note(self, note, context):
        """Implement to return the result for a :class:`~.score.Note`."""
        raise NotImplementedError

    def on_silence(self, leaf, context):
        """Implement to return the result for a :class:`~.score.Rest`.

        By default also called for a :class:`~.score.Controller`.

        """
        raise NotImplementedError

    def on_controller(self, controller, context):
        """Return the result for a :class:`~.score.Controller`.

        The default implementation calls :meth:`on_silence` with the
        controller.

        """
        return self.on_silence(controller, context)

    def combine_seq(self, left, right):
        """Implement to combine the results of the two halves of a Seq.

        The ``right`` result was computed in a context advanced with the
        duration of the left half.

        """
        raise NotImplementedError

    def combine_par(self, top, bottom):
        """Implement to combine the results of the two halves of a Par."""
        raise NotImplementedError

    def on_group(self, group, result, context):
        """Return the result for a :class:`~.score.Group`.

        The ``result`` was computed for the group's score, which was performed
        in a context containing the group's attributes. The default
        implementation returns the result unchanged.

        """
        return result

