from datetime import datetime
from typing import Optional

import attrs


def normalize_email(email: Optional[str]) -> str:
    return (email or '').strip().lower()


def format_display_name(first_name: Optional[str], last_name: Optional[str]) -> Optional[str]:
    name = ' '.join(part for part in (first_name, last_name) if part).strip()
    return name or None


@attrs.define
class CustomerEntity:
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def display_name(self) -> Optional[str]:
        return format_display_name(self.first_name, self.last_name)

    def merge_contact(
        self,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> dict[str, str]:
        """
        Return the supplied contact fields that differ from the stored ones.

        Missing values never erase what is already on file.
        """
        changes: dict[str, str] = {}
        if first_name and first_name != self.first_name:
            changes['first_name'] = first_name
        if last_name and last_name != self.last_name:
            changes['last_name'] = last_name
        if phone and phone != self.phone:
            changes['phone'] = phone
        return changes
