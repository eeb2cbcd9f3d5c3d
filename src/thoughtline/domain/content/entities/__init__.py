from thoughtline.domain.content.entities.comment import Comment

__all__ = ["Comment"]
