from thoughtline.application.ports.feed import FeedReadPort

__all__ = ["FeedReadPort"]
