"""Feed ports (read side).

They return application DTOs (read models), not domain aggregates.
"""

from thoughtline.application.ports.feed.feed_read_port import FeedReadPort

__all__ = ["FeedReadPort"]
