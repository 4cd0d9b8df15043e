from pydantic import BaseModel, constr
from typing import Optional, Dict, Any


class ProductIn(BaseModel):
    name: constr(strip_whitespace=True, min_length=1)
    price: Optional[float] = None
    description: Optional[str] = ""
    image: Optional[str] = None


def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    out = {
        "_id": product_id,
        "name": p.name,
        "description": p.description or "",
        "image": p.image,
    }
    if p.price is not None:
        out["price"] = p.price
    return out
