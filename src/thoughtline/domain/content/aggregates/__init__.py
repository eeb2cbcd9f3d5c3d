from thoughtline.domain.content.aggregates.thought import Thought

__all__ = ["Thought"]
