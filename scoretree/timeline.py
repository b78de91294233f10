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
The Timeline, a flat list of time-stamped events, and the
:class:`TimelinePerformer` that creates a Timeline from a score.

Example::

    >>> from scoretree import note, group
    >>> tl = (note(60) & group(note(64) | note(67), {'slur': True})).to_timeline()
    >>> for event in tl:
    ...     print(event.time, event.object)
    ...
    0 <Note 60 duration=1>
    1 <Note 64 duration=1 slur=True>
    1 <Note 67 duration=1 slur=True>

"""

import collections
import operator

from .performer import Performer


_time = operator.attrgetter('time')


class Event(collections.namedtuple("Event", "time object")):
    """An object (mostly a :class:`~.score.Note`) at a certain time.

    Events are equal if both time and object are equal, but they are ordered
    by time only.

    """
    __slots__ = ()

    def __lt__(self, other):
        return self.time < other.time

    def __le__(self, other):
        return self.time <= other.time

    def __gt__(self, other):
        return self.time > other.time

    def __ge__(self, other):
        return self.time >= other.time

    @property
    def attributes(self):
        """The attributes of the object."""
        return self.object.attributes


Event.time.__doc__ = "The time the event occurs."
Event.object.__doc__ = "The object, mostly a Note."


class Timeline:
    """An immutable sequence of :class:`Event` objects, ordered by time.

    Adding two timelines concatenates them, which is only correct if all
    events of the second timeline do not occur earlier than those of the first.
    Use :meth:`merge` to combine timelines whose events overlap in time.

    """
    __slots__ = ('_events',)

    def __init__(self, events=()):
        self._events = tuple(events)

    @classmethod
    def of(cls, *events):
        """Create a Timeline from the events given as arguments."""
        return cls(events)

    def __repr__(self):
        return "<{} ({} events)>".format(type(self).__name__, len(self._events))

    def __iter__(self):
        return iter(self._events)

    def __len__(self):
        return len(self._events)

    def __getitem__(self, index):
        return self._events[index]

    def __eq__(self, other):
        if isinstance(other, Timeline):
            return self._events == other._events
        return NotImplemented

    def __hash__(self):
        return hash(self._events)

    def __add__(self, other):
        """Return a new Timeline with the events of other appended."""
        if not isinstance(other, Timeline):
            return NotImplemented
        return type(self)(self._events + other._events)

    @property
    def events(self):
        """The tuple of events."""
        return self._events

    def merge(self, other):
        """Return a new Timeline with the events of both timelines, sorted by time.

        Events with the same time keep their order, and our events come
        before those of the other.

        """
        return type(self)(sorted(self._events + other._events, key=_time))

    def shift(self, offset):
        """Return a new Timeline with all events moved ``offset`` in time."""
        return type(self)(Event(e.time + offset, e.object) for e in self._events)

    def end(self):
        """Return the time the last event ends, or 0 if there are no events.

        Objects without a duration are considered to have length 0.

        """
        return max((e.time + getattr(e.object, 'duration', 0) for e in self._events), default=0)


class TimelinePerformer(Performer):
    """Perform a score into a :class:`Timeline`.

    Every note becomes an :class:`Event` at the time the note starts. Rests
    and controllers do not create events. Notes inherit the attributes of the
    groups they are in, unless they define the same attribute themselves.

    """
    def on_note(self, note, context):
        return Timeline((Event(context.time, note.inherit(context.attributes)),))

    def on_silence(self, leaf, context):
        return Timeline()

    def combine_seq(self, left, right):
        return left + right

    def combine_par(self, top, bottom):
        return top.merge(bottom)

