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
Test the Timeline and the TimelinePerformer.
"""

### find scoretree
import sys
sys.path.insert(0, '.')

from scoretree import *


def test_event():
    e = Event(1, note(60))
    assert e.time == 1
    assert e.object == note(60)
    assert e == Event(1, note(60))
    assert e != Event(2, note(60))
    assert Event(0, note(72)) < e
    assert Event(1, note(72)) <= e
    assert not Event(1, note(72)) < e
    assert Event(0, Note(60, 1, {'x': 1})).attributes['x'] == 1


def test_timeline():
    a = Timeline.of(Event(0, note(60)), Event(2, note(62)))
    b = Timeline([Event(1, note(64)), Event(2, note(65))])
    assert len(a) == 2
    assert a[1].time == 2
    assert list(a + b) == [Event(0, note(60)), Event(2, note(62)), Event(1, note(64)), Event(2, note(65))]
    assert a.merge(b) == Timeline.of(
        Event(0, note(60)), Event(1, note(64)), Event(2, note(62)), Event(2, note(65)))
    assert a == Timeline(a.events)
    assert a != b
    assert not Timeline()
    assert Timeline() == Timeline.of()
    assert a.shift(3) == Timeline.of(Event(3, note(60)), Event(5, note(62)))
    assert a.end() == 3
    assert Timeline().end() == 0


def test_performer():
    tl = (note(60, 1) & note(64, 1)).to_timeline()
    assert tl == Timeline.of(Event(0, note(60, 1)), Event(1, note(64, 1)))

    tl = (note(60, 1) | note(64, 1)).to_timeline()
    assert len(tl) == 2
    assert all(e.time == 0 for e in tl)
    assert set(e.object.pitch for e in tl) == {60, 64}

    tl = TimelinePerformer().perform(note(60) & rest(2) & note(62), Context(4))
    assert [e.time for e in tl] == [4, 7]

    # rests and controllers do not create events
    assert not (rest(3) & controller('tempo', {'tempo': 100})).to_timeline()
    tl = (controller('tempo', {'tempo': 100}) & note(60)).to_timeline()
    assert tl == Timeline.of(Event(0, note(60)))


def test_inheritance():
    tl = group(note(60, 2), {'accented': True}).to_timeline()
    assert tl[0].attributes['accented'] is True

    music = group(note(60) & Note(62, 1, {'slur': False}) | note(55, 2), {'slur': True})
    tl = music.to_timeline()
    assert [(e.time, e.object.pitch, e.object.slur) for e in tl] == [
        (0, 60, True), (0, 55, True), (1, 62, False)]

    # nested groups, the innermost wins
    music = group(note(60) & group(note(62), {'dynamic': 'f'}), {'dynamic': 'p', 'slur': True})
    tl = music.to_timeline()
    assert tl[0].object == Note(60, 1, {'dynamic': 'p', 'slur': True})
    assert tl[1].object == Note(62, 1, {'dynamic': 'f', 'slur': True})


def test_main():
    """Main test function."""
    music = (seq_list_of_pitches([60, 62, 64, 65]) | (rest(1) & note(48, 2))) & note(67).delay(1)
    tl = music.to_timeline()
    assert len(tl) == sum(1 for _ in music.notes())
    assert all(0 <= e.time < music.duration for e in tl)
    assert [e.time for e in tl] == sorted(e.time for e in tl)
    assert [(e.time, e.object.pitch) for e in tl] == [
        (0, 60), (1, 62), (1, 48), (2, 64), (3, 65), (5, 67)]
    assert tl.end() == 6


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
