"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Represents a sellable item in the shop. Instances are frozen: any
    attempt to reassign a field raises a validation error.

    Attributes:
        id: Opaque identifier assigned once at creation
        title: Product display name
        description: Short description, may be empty
        retail_price: Retail price in cents
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    id: str = Field(..., min_length=1, description="Product identifier")
    title: str = Field(..., min_length=1, description="Product title")
    description: str = Field(default="", description="Product description")
    retail_price: int = Field(
        ...,
        ge=0,
        alias="retailPrice",
        description="Retail price in cents"
    )

    def matches(self, normalized_term: str) -> bool:
        """Check whether an already lower-cased term occurs in title or description."""
        return (
            normalized_term in self.title.lower()
            or normalized_term in self.description.lower()
        )
