from thoughtline.presentation.api.routers.auth import router as auth_router
from thoughtline.presentation.api.routers.thoughts import router as thoughts_router
from thoughtline.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "thoughts_router",
    "users_router",
]
