"""Resolution of the real invoking user."""

import os
import pwd


def user() -> str:
    """Get the user who invoked the tool, even when running under sudo."""
    sudo_user = os.environ.get("SUDO_USER")
    if sudo_user:
        return sudo_user
    return pwd.getpwuid(os.getuid()).pw_name
