from thoughtline.domain.user.aggregates.user import (
    MAX_BIO_LENGTH,
    MAX_DISPLAY_NAME_LENGTH,
    User,
)

__all__ = ["MAX_BIO_LENGTH", "MAX_DISPLAY_NAME_LENGTH", "User"]
