"""Text rules shared by thoughts and comments."""

from thoughtline.domain.content.exceptions import InvalidContentError

MAX_CONTENT_LENGTH = 280


def validate_content(content: str) -> str:
    """Return ``content`` unchanged if it is 1-280 non-blank characters.

    Raises
    ------
    InvalidContentError
        If the text is empty, whitespace only, or too long
    """
    if not content or not content.strip():
        msg = "Content cannot be empty"
        raise InvalidContentError(msg)
    if len(content) > MAX_CONTENT_LENGTH:
        msg = f"Content cannot exceed {MAX_CONTENT_LENGTH} characters"
        raise InvalidContentError(msg)
    return content
