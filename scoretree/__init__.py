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
The scoretree module.

Build musical scores as immutable trees, combine and transform them with a
small algebra, and perform them into a flat :class:`~.timeline.Timeline`.

The most important names are available directly from this module.

"""

from .pkginfo import version, version_string
from .attributes import AttributeStore, UnsupportedOperation
from .score import (
    Score, Leaf, Note, Rest, Controller, Seq, Par, Group,
    note, rest, controller, group, none,
    seq, par, trunc_par, truncate,
    seq_list, seq_list_of_pitches, par_list, par_list_of_pitches,
)
from .performer import Context, Performer
from .timeline import Event, Timeline, TimelinePerformer


__all__ = (
    'version', 'version_string',
    'AttributeStore', 'UnsupportedOperation',
    'Score', 'Leaf', 'Note', 'Rest', 'Controller', 'Seq', 'Par', 'Group',
    'note', 'rest', 'controller', 'group', 'none',
    'seq', 'par', 'trunc_par', 'truncate',
    'seq_list', 'seq_list_of_pitches', 'par_list', 'par_list_of_pitches',
    'Context', 'Performer',
    'Event', 'Timeline', 'TimelinePerformer',
)
