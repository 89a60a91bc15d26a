"""Strongly typed identifiers for ballot domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PollId = NewType("PollId", UUID)
AnswerId = NewType("AnswerId", UUID)
VoteId = NewType("VoteId", UUID)
ParameterId = NewType("ParameterId", UUID)

# Opaque client-supplied voter identifier, used only for distinct counting
VoterId = NewType("VoterId", str)
