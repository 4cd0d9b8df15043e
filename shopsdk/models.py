# shopsdk/models.py
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as SchemaError


class Product(BaseModel):
    """
    A product as the backend returns it.

    The backend may name the identifier either `id` or `_id`; both are kept
    and `key` picks whichever is present. Identifiers are opaque strings.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    mongo_id: Optional[str] = Field(default=None, alias="_id")
    name: Optional[str] = None
    price: Optional[Union[int, float]] = None
    description: Optional[str] = None
    image: Optional[str] = None

    @field_validator("id", "mongo_id", mode="before")
    @classmethod
    def _opaque_id(cls, v):
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool) or isinstance(v, (dict, list)):
            raise ValueError("identifier must be a scalar")
        return str(v)

    @property
    def key(self) -> Optional[str]:
        return self.mongo_id or self.id

    @classmethod
    def from_wire(cls, data: Any) -> Optional["Product"]:
        # single normalization point; anything that is not a product object yields None
        if not isinstance(data, dict):
            return None
        try:
            return cls.model_validate(data)
        except SchemaError:
            return None


class ProductIn(BaseModel):
    """Request body for create and update (whole-record PUT)."""

    name: str
    price: Optional[Union[int, float]] = None
    description: str = ""
    image: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        data = self.model_dump()
        if self.price is None:
            # an empty price field is omitted, never sent as null or 0
            data.pop("price")
        return data
