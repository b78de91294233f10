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
Test the Performer protocol.
"""

import pytest

### find scoretree
import sys
sys.path.insert(0, '.')

from scoretree import *


class Log(Performer):
    """Performs a score into a list of (time, kind, value, attributes) tuples."""
    def on_note(self, note, context):
        return [(context.time, 'note', note.pitch, dict(context.attributes))]

    def on_silence(self, leaf, context):
        return [(context.time, 'silence', leaf.duration, dict(context.attributes))]

    def combine_seq(self, left, right):
        return left + right

    def combine_par(self, top, bottom):
        return top + bottom


class ControllerLog(Log):
    def on_controller(self, controller, context):
        return [(context.time, 'controller', controller.value, {})]


class Count(Performer):
    """Counts the notes."""
    def on_note(self, note, context):
        return 1

    def on_silence(self, leaf, context):
        return 0

    def combine_seq(self, left, right):
        return left + right

    combine_par = combine_seq


class MyNote(Note):
    pass


def test_context():
    c = Context()
    assert c.time == 0
    assert dict(c.attributes) == {}
    assert c.advance(2).time == 2
    assert c.advance(2).advance(1) == Context(3)
    c1 = c.enter(group(note(60), {'slur': True}))
    assert c1.attributes['slur'] is True
    c2 = c1.enter(group(note(60), {'slur': False, 'dynamic': 'p'}))
    assert dict(c2.attributes) == {'slur': False, 'dynamic': 'p'}
    assert dict(c2.advance(1).attributes) == dict(c2.attributes)
    assert c.enter(group(note(60))) is c


def test_dispatch():
    music = note(60) & rest(2) & (note(64) | controller('cc1', {'value': 7})) & note(67)
    assert Log().perform(music) == [
        (0, 'note', 60, {}),
        (1, 'silence', 2, {}),
        (3, 'note', 64, {}),
        (3, 'silence', 0, {}),      # controller handled as silence by default
        (4, 'note', 67, {}),
    ]
    assert ControllerLog().perform(music)[3] == (3, 'controller', 7, {})
    assert Log().perform(note(60), Context(10)) == [(10, 'note', 60, {})]

    # subclasses of the score types are dispatched like their base class
    assert Log().perform(MyNote(62) & rest()) == [(0, 'note', 62, {}), (1, 'silence', 1, {})]


def test_group():
    music = group(note(60) & group(note(62), {'a': 2, 'b': 3}), {'a': 1})
    assert Log().perform(music) == [
        (0, 'note', 60, {'a': 1}),
        (1, 'note', 62, {'a': 2, 'b': 3}),
    ]


def test_errors():
    with pytest.raises(NotImplementedError):
        Performer().perform(note(60))
    with pytest.raises(TypeError):
        Count().perform(42)
    with pytest.raises(TypeError):
        Count().perform(note(60) & Score())


def test_main():
    """Main test function."""
    music = seq_list_of_pitches([60, 62, 64]) * 3 | note(48, 9)
    assert Count().perform(music) == 10
    assert Count().perform(note(60) * 3000) == 3000
    assert Count().perform(none()) == 0


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
