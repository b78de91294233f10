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


r"""
The score algebra.

A score is an immutable tree. The leaves are :class:`Note`, :class:`Rest` and
:class:`Controller` nodes; :class:`Seq` and :class:`Par` combine two scores
sequentially and in parallel, and a :class:`Group` wraps a score with
attributes its leaves inherit when the score is performed.

Scores are built with the helper functions and combined with operators::

    >>> from scoretree.score import *
    >>> s = note(60, 2) & rest(3)           # sequential
    >>> s.duration
    5
    >>> (note(60, 2) | rest(3)).duration    # parallel
    3
    >>> (s / note(67, 4)).duration          # parallel, cut to the shortest
    4
    >>> (note(60) * 3) == note(60) & note(60) & note(60)
    True
    >>> s.dump()
    <Seq duration=5>
     ├╴<Note 60 duration=2>
     ╰╴<Rest duration=3>

Every operation returns a new tree. Equality is structural, durations are
compared by value, so ``note(60, 1) == note(60, 1.0)``.

.. note::

   The attributes of a :class:`Group` are not taken into account when
   comparing scores: two groups wrapping equal scores are equal, even if
   their attributes differ. The attributes of the leaves *are* compared.

All traversals use an explicit stack instead of recursion, so very deep trees
(e.g. ``note(60) * 10000``) can be handled.

"""

import numbers

from .attributes import AttributeStore


__all__ = (
    'Score', 'Leaf', 'Note', 'Rest', 'Controller', 'Seq', 'Par', 'Group',
    'note', 'rest', 'controller', 'group', 'none',
    'seq', 'par', 'trunc_par', 'truncate',
    'seq_list', 'seq_list_of_pitches', 'par_list', 'par_list_of_pitches',
)


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


class Score:
    """Base class for all score nodes.

    Don't instantiate this class directly, use one of the subclasses.

    """
    duration = 0    #: The musical length of the score.

    def children(self):
        """Return the tuple of child scores (empty for a leaf)."""
        return ()

    def _fields(self):
        """Return the tuple of values that are compared by ``==`` (besides
        the children)."""
        return ()

    def __eq__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is b:
                continue
            if type(a) is not type(b) or a._fields() != b._fields():
                return False
            pairs.extend(zip(a.children(), b.children()))
        return True

    def __hash__(self):
        return hash((type(self).__name__, self.duration))

    def __and__(self, other):
        """Sequential composition, returns a :class:`Seq`."""
        if not isinstance(other, Score):
            return NotImplemented
        return Seq(self, other)

    def __or__(self, other):
        """Parallel composition, returns a :class:`Par`."""
        if not isinstance(other, Score):
            return NotImplemented
        return Par(self, other)

    def __truediv__(self, other):
        """Truncating parallel composition, see :func:`trunc_par`."""
        if not isinstance(other, Score):
            return NotImplemented
        return trunc_par(self, other)

    def __mul__(self, count):
        """Repetition, see :meth:`repeat`."""
        return self.repeat(count)

    __rmul__ = __mul__

    def repeat(self, count):
        """Return the score sequenced ``count`` times with itself.

        The returned Seq chain is left-associated, i.e. ``s.repeat(3)`` is
        ``(s & s) & s``. Repeating zero times returns :func:`none`, repeating
        once returns the score itself.

        Raises TypeError if ``count`` is not an integer and ValueError if it
        is negative.

        """
        if isinstance(count, bool) or not isinstance(count, numbers.Integral):
            raise TypeError("repeat count must be an integer, not {}".format(
                type(count).__name__))
        if count < 0:
            raise ValueError("repeat count must not be negative: {}".format(count))
        if count == 0:
            return none()
        result = self
        for _ in range(count - 1):
            result = Seq(result, self)
        return result

    def delay(self, length):
        """Return the score preceded by a rest of ``length``."""
        return Seq(Rest(length), self)

    def truncate(self, length):
        """Return the score cut off at ``length``, see :func:`truncate`."""
        return truncate(self, length)

    def _truncate(self, length):
        """Implement truncating for this node type."""
        raise NotImplementedError

    def fold(self, leaf, seq, par, group):
        """Reduce the score tree bottom-up.

        ``leaf(node)`` is called for every leaf, ``seq(node, left, right)``,
        ``par(node, top, bottom)`` and ``group(node, result)`` for the
        composite nodes, with the values computed for their children. Returns
        the value computed for this node.

        """
        results = []
        stack = [(self, False)]
        while stack:
            node, done = stack.pop()
            if isinstance(node, Leaf):
                results.append(leaf(node))
            elif done:
                if isinstance(node, Group):
                    results.append(group(node, results.pop()))
                else:
                    second = results.pop()
                    first = results.pop()
                    func = seq if isinstance(node, Seq) else par
                    results.append(func(node, first, second))
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children()))
        return results.pop()

    def map(self, func):
        """Return a new score with ``func`` applied to every leaf.

        ``func`` is called with every :class:`Leaf` and should return a
        Score. The Seq, Par and Group nodes are rebuilt around the results.

        """
        return self.fold(
            func,
            lambda node, left, right: Seq(left, right),
            lambda node, top, bottom: Par(top, bottom),
            lambda node, score: Group(score, node.attributes))

    def reverse(self):
        """Return the score with the order of all sequences reversed.

        The duration is preserved and reversing twice returns an equal score.

        """
        return self.fold(
            lambda node: node,
            lambda node, left, right: Seq(right, left),
            lambda node, top, bottom: Par(top, bottom),
            lambda node, score: Group(score, node.attributes))

    def transpose(self, steps):
        """Return a new score with ``steps`` added to the pitch of every note."""
        return self.map(lambda leaf: leaf.transpose(steps))

    def leaves(self):
        """Iterate over the leaves, from left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                yield node
            else:
                stack.extend(reversed(node.children()))

    def notes(self):
        """Iterate over the :class:`Note` leaves, from left to right."""
        return (leaf for leaf in self.leaves() if isinstance(leaf, Note))

    def to_timeline(self, time=0):
        """Perform the score using a :class:`~.timeline.TimelinePerformer`,
        starting at ``time``, and return the :class:`~.timeline.Timeline`."""
        from .performer import Context
        from .timeline import TimelinePerformer
        return TimelinePerformer().perform(self, Context(time))

    def dump(self, file=None, style=None):
        """Display a graphical representation of the score tree.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        print(repr(self), file=file)
        stack = [(child, "", i == len(self.children()) - 1)
                    for i, child in reversed(list(enumerate(self.children())))]
        while stack:
            node, prefix, last = stack.pop()
            print(prefix + d[2 + last] + repr(node), file=file)
            children = node.children()
            prefix += d[last]
            stack.extend((child, prefix, i == len(children) - 1)
                    for i, child in reversed(list(enumerate(children))))


class Leaf(AttributeStore, Score):
    """Base class for the leaf nodes, that carry attributes."""
    def __init__(self, duration, attributes=None):
        self._duration = duration
        self._init_attributes(attributes)

    def __repr__(self):
        def fields():
            yield type(self).__name__
            yield from self._repr_fields()
            yield from ("{}={}".format(key, repr(value))
                        for key, value in self._attributes.items())
        return "<{}>".format(" ".join(fields()))

    def _repr_fields(self):
        yield "duration={}".format(self._duration)

    @property
    def duration(self):
        """The duration."""
        return self._duration

    def _fields(self):
        return (self._duration, dict(self._attributes))

    def _with_duration(self, duration):
        """Return a copy with another duration."""
        return type(self)(duration, self._attributes)

    def _truncate(self, length):
        if length >= self._duration:
            return self
        elif length <= 0:
            return none()
        return self._with_duration(length)

    def transpose(self, steps):
        """Return self, only notes have a pitch."""
        return self


class Note(Leaf):
    """A note with a pitch (e.g. a MIDI key number) and a duration."""
    def __init__(self, pitch, duration=1, attributes=None):
        self._pitch = pitch
        super().__init__(duration, attributes)

    def _repr_fields(self):
        yield str(self._pitch)
        yield from super()._repr_fields()

    def __hash__(self):
        return hash((type(self).__name__, self._pitch, self._duration))

    @property
    def pitch(self):
        """The pitch."""
        return self._pitch

    def _fields(self):
        return (self._pitch,) + super()._fields()

    def _with_duration(self, duration):
        return type(self)(self._pitch, duration, self._attributes)

    def transpose(self, steps):
        """Return a new Note with the pitch raised by ``steps``."""
        return type(self)(self._pitch + steps, self._duration, self._attributes)


class Rest(Leaf):
    """A silence with a duration.

    The rest with duration 0 is the empty score, see :func:`none`.

    """
    def __init__(self, duration=1, attributes=None):
        super().__init__(duration, attributes)


class Controller(Leaf):
    """A non-sounding event, such as a tempo or controller change.

    A Controller has a ``name``, and its value is stored in the attributes,
    under the same name or under ``"value"``::

        >>> Controller('tempo', {'tempo': 120}).value
        120
        >>> Controller('cc1', {'value': 64}).value
        64

    A Controller always has a duration of 0.

    """
    def __init__(self, name, attributes=None):
        self._name = name
        super().__init__(0, attributes)

    def _repr_fields(self):
        yield repr(self._name)

    def __hash__(self):
        return hash((type(self).__name__, self._name))

    @property
    def name(self):
        """The controller name."""
        return self._name

    @property
    def value(self):
        """The value, read from the attribute with our name or else ``"value"``."""
        if self._name in self._attributes:
            return self._attributes[self._name]
        return self._attributes.get('value')

    def _fields(self):
        return (self._name, dict(self._attributes))


class Seq(Score):
    """Sequential composition: ``right`` starts when ``left`` ends."""
    def __init__(self, left, right):
        self.left = left        #: The first score.
        self.right = right      #: The score that follows.
        self.duration = left.duration + right.duration

    def __repr__(self):
        return "<Seq duration={}>".format(self.duration)

    def children(self):
        return (self.left, self.right)

    def _truncate(self, length):
        if length >= self.duration:
            return self
        elif length <= self.left.duration:
            return truncate(self.left, length)
        return Seq(self.left, truncate(self.right, length - self.left.duration))


class Par(Score):
    """Parallel composition: ``top`` and ``bottom`` start at the same time."""
    def __init__(self, top, bottom):
        self.top = top          #: The upper score.
        self.bottom = bottom    #: The lower score.
        self.duration = max(top.duration, bottom.duration)

    def __repr__(self):
        return "<Par duration={}>".format(self.duration)

    def children(self):
        return (self.top, self.bottom)

    def _truncate(self, length):
        if length >= self.duration:
            return self
        return Par(truncate(self.top, length), truncate(self.bottom, length))


class Group(Score):
    """A score with attributes that are inherited by its leaves when the
    score is performed.

    The attributes do not take part in comparing scores.

    """
    def __init__(self, score, attributes=None):
        self.score = score      #: The wrapped score.
        self._attributes = dict(attributes or ())
        self.duration = score.duration

    def __repr__(self):
        def fields():
            yield "Group"
            yield "duration={}".format(self.duration)
            yield from ("{}={}".format(key, repr(value))
                        for key, value in self._attributes.items())
        return "<{}>".format(" ".join(fields()))

    @property
    def attributes(self):
        """A copy of the attributes."""
        return dict(self._attributes)

    def children(self):
        return (self.score,)

    def _truncate(self, length):
        if length >= self.duration:
            return self
        return Group(truncate(self.score, length), self._attributes)


def truncate(score, length):
    """Return the score cut off at ``length``.

    Leaves longer than ``length`` get the length as duration, leaves that
    would get a zero or negative length become :func:`none`. Of a Seq, the
    right part is dropped if ``length`` ends within the left part. Truncating
    to the score's own duration (or longer) returns the score itself.

    """
    # descend the left spine of Seq chains without recursion
    while isinstance(score, Seq) and length < score.duration and length <= score.left.duration:
        score = score.left
    return score._truncate(length)


def seq(a, b):
    """Return a :class:`Seq` of the two scores, same as ``a & b``."""
    return Seq(a, b)


def par(a, b):
    """Return a :class:`Par` of the two scores, same as ``a | b``."""
    return Par(a, b)


def trunc_par(a, b):
    """Return a :class:`Par` of the two scores, both cut to the duration of
    the shortest; same as ``a / b``."""
    length = min(a.duration, b.duration)
    return Par(truncate(a, length), truncate(b, length))


def note(pitch, duration=1, attrs=None):
    """Return a :class:`Note`."""
    return Note(pitch, duration, attrs)


def rest(duration=1, attrs=None):
    """Return a :class:`Rest`."""
    return Rest(duration, attrs)


def controller(name, attrs=None):
    """Return a :class:`Controller`."""
    return Controller(name, attrs)


def group(score, attrs=None):
    """Return a :class:`Group`."""
    return Group(score, attrs)


def none():
    """Return the empty score, a :class:`Rest` of length 0."""
    return Rest(0)


def _chain(cls, scores):
    """Combine the scores left-associated using ``cls``."""
    scores = iter(scores)
    result = next(scores, None)
    if result is None:
        return none()
    for score in scores:
        result = cls(result, score)
    return result


def seq_list(*scores):
    """Return the scores combined sequentially, as with ``a & b & c``."""
    return _chain(Seq, scores)


def seq_list_of_pitches(pitches, duration=1):
    """Return notes with the pitches combined sequentially."""
    return _chain(Seq, (Note(p, duration) for p in pitches))


def par_list(*scores):
    """Return the scores combined in parallel, as with ``a | b | c``."""
    return _chain(Par, scores)


def par_list_of_pitches(pitches, duration=1):
    """Return notes with the pitches combined in parallel (a chord)."""
    return _chain(Par, (Note(p, duration) for p in pitches))

