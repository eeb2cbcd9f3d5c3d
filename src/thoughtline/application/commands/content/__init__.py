"""Content commands - thoughts, comments and likes."""

from thoughtline.application.commands.content.add_comment_command import (
    AddCommentCommand,
)
from thoughtline.application.commands.content.create_thought_command import (
    CreateThoughtCommand,
)
from thoughtline.application.commands.content.delete_thought_command import (
    DeleteThoughtCommand,
)
from thoughtline.application.commands.content.toggle_like_command import (
    ToggleLikeCommand,
)
from thoughtline.application.commands.content.update_thought_command import (
    UpdateThoughtCommand,
)

__all__ = [
    "AddCommentCommand",
    "CreateThoughtCommand",
    "DeleteThoughtCommand",
    "ToggleLikeCommand",
    "UpdateThoughtCommand",
]
