from folio.application.commands.profile.attach_avatar_command import (
    AttachAvatarCommand,
)
from folio.application.commands.profile.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = ["AttachAvatarCommand", "UpdateProfileCommand"]
