from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

USERS = "users"
CATEGORIES = "categories"
PRODUCTS = "products"


class Role(str, Enum):
    admin = "admin"
    customer = "customer"


class UserRecord(BaseModel):
    """
    Mirrors a record of the on-disk "users" collection:
      { "id": 1, "name": "...", "email": "...", "password": "<bcrypt hash>",
        "role": "admin" | "customer", "verified": false }
    """

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    email: str
    password: str
    role: Role = Role.customer
    verified: bool = False

    @classmethod
    def from_disk_doc(cls, doc: Mapping[str, Any]) -> "UserRecord":
        return cls.model_validate(doc)

    def public_view(self) -> dict[str, Any]:
        # Never expose the password hash; "verified" is internal.
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role.value}
