# app/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    price: Optional[float] = None
    description: Optional[str] = ""
    image: Optional[str] = None
