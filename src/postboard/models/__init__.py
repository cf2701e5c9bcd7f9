from postboard.models.core import (  # noqa: F401
    PostStatus,
    Profile,
    ProfileTerritory,
    Role,
    ScheduledPost,
    SocialGroup,
    Territory,
)
