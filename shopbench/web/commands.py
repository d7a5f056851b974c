from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator

from shopbench.utils.formatters import record
from shopbench.constants import PRODUCT_ID_SEPARATOR
from shopbench.utils.validators import require_no_separator, require_non_blank


class ClientSaveCommand(BaseModel):
    username: Optional[str] = None
    name: str

    @field_validator("username")
    @classmethod
    def _username(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        # "$" belongs to product ids, a client under one would shadow a product
        return require_no_separator(require_non_blank(v, "username"), PRODUCT_ID_SEPARATOR, "username")

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return require_non_blank(v, "name")

    def __str__(self) -> str:
        return record("ClientSaveCommand", username=self.username, name=self.name)


class ProductSaveCommand(BaseModel):
    username: str
    name: str
    amount: int

    @field_validator("username", "name")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        return require_non_blank(v, info.field_name)

    def __str__(self) -> str:
        return record("ProductSaveCommand", username=self.username, name=self.name, amount=self.amount)


class ProductDeleteCommand(BaseModel):
    id: str
    username: str

    @field_validator("id", "username")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        return require_non_blank(v, info.field_name)

    def __str__(self) -> str:
        return record("ProductDeleteCommand", id=self.id, username=self.username)
