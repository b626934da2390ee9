"""
Suite members shown on the home page. Edit this list when the roster changes.
"""

from typing import List

from suitehub.models import Member

MEMBERS: List[Member] = [
    Member(id=1, name="Alex", one_liner="The night owl"),
    Member(id=2, name="Jordan", one_liner="Always down"),
    Member(id=3, name="Sam", one_liner="Chef mode"),
    Member(id=4, name="Casey", one_liner="Music curator"),
    Member(id=5, name="Morgan", one_liner="The planner"),
    Member(id=6, name="Riley", one_liner="Game master"),
    Member(id=7, name="Quinn", one_liner="Chill vibes"),
    Member(id=8, name="Avery", one_liner="Late night crew"),
]
