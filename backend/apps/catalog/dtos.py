from dataclasses import dataclass


@dataclass
class ProductDTO:
    id: int
    name: str
    price: float
    description: str
    image: str
    category: str


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
