import logging
import threading
from typing import Dict, List, Optional

from splitledger.core.errors import GroupNotFound, InvalidInput
from splitledger.models.group import Group

logger = logging.getLogger(__name__)


class GroupRepository:
    """In-memory registry of groups. One instance per service, never global."""

    def __init__(self):
        self._groups: Dict[str, Group] = {}
        self._lock = threading.Lock()

    def create_group(self, group_id: Optional[str] = None, name: str = "") -> Group:
        """Register a new group. Raises InvalidInput if the id is taken."""
        with self._lock:
            if group_id is not None and group_id in self._groups:
                raise InvalidInput("Group already exists", {"group_id": group_id})
            group = Group(group_id=group_id, name=name)
            self._groups[group.id] = group
        logger.info("Opened group %s (%s)", group.id, name or "unnamed")
        return group

    def get_group(self, group_id: str) -> Group:
        """Get a group by id. Raises GroupNotFound."""
        with self._lock:
            group = self._groups.get(group_id)
        if group is None:
            raise GroupNotFound("Group not found", {"group_id": group_id})
        return group

    def list_groups(self) -> List[Group]:
        with self._lock:
            return list(self._groups.values())
