"""Ownership resolution.

Every entity is owned by the owner of the BrontoBoard at the root of its
parent chain. ``OwnershipResolver`` walks that chain one hop at a time, so the
same code serves Classes, Assignments and OfficeHours.
"""

import logging
from dataclasses import dataclass

from core.entity_kind import EntityKind
from core.exceptions import EntityNotFoundError, InternalInconsistencyError
from models.brontoboard import BrontoBoardModel
from utils.entity_store import EntityStore

logger = logging.getLogger(__name__)

# child kind -> (parent kind, attribute holding the parent ID)
PARENT_LINKS = {
    EntityKind.ASSIGNMENT: (EntityKind.CLASS, "class_id"),
    EntityKind.OFFICE_HOUR: (EntityKind.CLASS, "class_id"),
    EntityKind.CLASS: (EntityKind.BRONTOBOARD, "brontoboard_id"),
}


@dataclass(frozen=True)
class Ownership:
    """Result of resolving an entity's owner."""

    board: BrontoBoardModel
    owner_id: str
    entity: object


class OwnershipResolver:
    """Resolves the owning user of any stored entity."""

    def __init__(self, store: EntityStore):
        self.store = store

    def resolve_owner(self, kind: EntityKind, entity_id: str) -> Ownership:
        """Walk from an entity up to its BrontoBoard.

        Args:
            kind: Kind of the starting entity.
            entity_id: ID of the starting entity.

        Returns:
            Ownership with the root board, its owner, and the starting entity.

        Raises:
            EntityNotFoundError: If the starting entity does not exist.
            InternalInconsistencyError: If a parent along the chain is missing,
                or the root board has no owner.
        """
        entity = self.store.get(kind, entity_id)
        if entity is None:
            raise EntityNotFoundError(kind, entity_id)

        current, current_kind, current_id = entity, kind, entity_id
        while current_kind != EntityKind.BRONTOBOARD:
            parent_kind, link = PARENT_LINKS[current_kind]
            parent_id = getattr(current, link, None)
            parent = self.store.get(parent_kind, parent_id)
            if parent is None:
                logger.error(
                    "%s %s points at missing %s %s",
                    current_kind.label,
                    current_id,
                    parent_kind.label,
                    parent_id,
                )
                raise InternalInconsistencyError(
                    current_kind,
                    current_id,
                    f"parent {parent_kind.label} {parent_id} does not exist",
                )
            current, current_kind, current_id = parent, parent_kind, parent_id

        if not current.owner_id:
            logger.error("BrontoBoard %s has no owner", current_id)
            raise InternalInconsistencyError(
                EntityKind.BRONTOBOARD, current_id, "board has no owner"
            )
        return Ownership(board=current, owner_id=current.owner_id, entity=entity)
