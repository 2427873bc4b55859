"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dami.domain.model.like import Like
from dami.domain.value import ClientId, Subject


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_client_and_subject(
        self, client_id: ClientId, subject: Subject
    ) -> Optional[Like]:
        """Find a client's like on a specific subject.

        Args:
            client_id: Anonymous client identifier
            subject: The article or video

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the client already liked this subject
        """
        pass

    @abstractmethod
    async def delete_by_client_and_subject(
        self, client_id: ClientId, subject: Subject
    ) -> bool:
        """Delete a client's like on a subject.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_subject(self, subject: Subject) -> int:
        """Count likes on a subject."""
        pass
