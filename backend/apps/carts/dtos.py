from dataclasses import dataclass


@dataclass
class CartLineDTO:
    product_id: int
    quantity: int


"""DTO dataclasses only. Mapping logic moved to mappers.py."""
