"""Users, tenants and the journal entry log."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from finmatrix.exceptions import TenantAccessError
from finmatrix.models import JournalEntry

logger = logging.getLogger(__name__)


class UserRole(str, Enum):
    """CA users review many clients; CLIENT users are bound to one tenant."""

    CA = "CA"
    CLIENT = "CLIENT"


class User(BaseModel):
    """A person or organisation that can view reports."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="User identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email")
    role: UserRole = Field(..., description="CA or CLIENT")
    client_id: Optional[str] = Field(None, description="Tenant a CLIENT user is bound to")


class UserDirectory:
    """In-memory user lookup, passed explicitly to whoever needs it."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: Dict[str, User] = {}
        for user in users:
            self.add(user)

    def __len__(self) -> int:
        return len(self._users)

    def add(self, user: User) -> User:
        if user.role is UserRole.CLIENT and not user.client_id:
            raise TenantAccessError(f"Client user {user.id} has no client_id")
        self._users[user.id] = user
        return user

    def get(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        wanted = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    def clients(self) -> List[User]:
        return [u for u in self._users.values() if u.role is UserRole.CLIENT]


class EntryRepository:
    """
    Append-only journal entry log shared by all tenants.

    Entries are never edited or removed. ``entries_for`` returns a snapshot
    list in posting order, which is what the ledger core consumes.
    """

    def __init__(self, entries: Iterable[JournalEntry] = ()):
        self._entries: List[JournalEntry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: JournalEntry) -> JournalEntry:
        self._entries.append(entry)
        return entry

    def extend(self, entries: Iterable[JournalEntry]) -> int:
        """Append many entries; returns how many were added."""
        added = list(entries)
        self._entries.extend(added)
        logger.info("Appended %d journal entries", len(added))
        return len(added)

    def entries_for(self, tenant_id: str) -> List[JournalEntry]:
        return [e for e in self._entries if e.tenant_id == tenant_id]

    def tenants(self) -> List[str]:
        """Tenant ids in first-posted order."""
        return list(dict.fromkeys(e.tenant_id for e in self._entries))


def resolve_visible_tenant(user: User, requested_tenant_id: Optional[str] = None) -> str:
    """
    Decide which tenant's entries a user may see.

    Args:
        user: The viewing user
        requested_tenant_id: Tenant selected in the view, if any

    Returns:
        Tenant id to filter by

    Raises:
        TenantAccessError: client asking for someone else's tenant, or a CA
            user with no tenant selected
    """
    if user.role is UserRole.CLIENT:
        if requested_tenant_id is not None and requested_tenant_id != user.client_id:
            raise TenantAccessError(
                f"User {user.id} may not view tenant {requested_tenant_id}"
            )
        return user.client_id

    if not requested_tenant_id:
        raise TenantAccessError(f"User {user.id} must select a tenant to view")
    return requested_tenant_id
