"""Application commands (write side).

Each command is constructed with its repositories, or from a
RepositoryFactory via ``from_factory``, and exposes ``async execute``.
Committing the unit of work is left to the caller.
"""

from thoughtline.application.commands.content import (
    AddCommentCommand,
    CreateThoughtCommand,
    DeleteThoughtCommand,
    ToggleLikeCommand,
    UpdateThoughtCommand,
)
from thoughtline.application.commands.user import UpdateProfileCommand

__all__ = [
    "AddCommentCommand",
    "CreateThoughtCommand",
    "DeleteThoughtCommand",
    "ToggleLikeCommand",
    "UpdateProfileCommand",
    "UpdateThoughtCommand",
]
