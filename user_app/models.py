"""
Data models for the User service.

Users live only in memory, so the model is a plain dataclass rather than
a database-mapped class. Each record serializes to the fixed JSON shape
``{"id", "name", "email"}``.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    """
    User record held by the in-memory store.

    Attributes:
        id: Unique identifier generated at creation time; never changes.
        name: Display name, stored verbatim (may be empty).
        email: Email address, stored verbatim (may be empty).
    """

    id: str
    name: str = ""
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the user to a dictionary representation.

        Returns:
            Dictionary containing all user fields.
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }

    def __repr__(self) -> str:
        """Return string representation of the user."""
        return f"<User {self.id}: {self.name}>"
