"""
Active profile tracking for the running process
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

class ProfileContext:
    """Holds which profile the UI is acting for; one instance per process"""

    def __init__(self, user_id: Optional[int] = None):
        self.user_id = user_id

    @property
    def is_set(self) -> bool:
        return self.user_id is not None

    def activate(self, user_id: int) -> None:
        """Make user_id the active profile"""
        self.user_id = user_id
        logger.info(f"Active profile set to user {user_id}")

    def clear(self) -> None:
        """Forget the active profile"""
        if self.user_id is not None:
            logger.info(f"Active profile {self.user_id} cleared")
        self.user_id = None
