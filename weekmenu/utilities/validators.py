"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class IngredientInput(BaseModel):
    """Schema for one ingredient of a meal."""
    id: Optional[Any] = None
    name: str = Field(..., max_length=100)
    quantity: str = Field(default="", max_length=50)
    ready: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Ingredient name cannot be blank."""
        v = _strip(v)
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v

    @field_validator('quantity')
    @classmethod
    def strip_quantity(cls, v):
        return _strip(v)


class IngredientUpdateInput(BaseModel):
    """Partial ingredient edit; omitted fields stay as they are."""
    name: Optional[str] = Field(default=None, max_length=100)
    quantity: Optional[str] = Field(default=None, max_length=50)
    ready: Optional[bool] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Ingredient name cannot be empty')
        return _strip(v)


class IngredientListInput(BaseModel):
    ingredients: List[IngredientInput] = Field(default_factory=list)


class MealNameInput(BaseModel):
    name: str = Field(default="", max_length=200)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class SlotInput(BaseModel):
    """Custom slot label; blank falls back to the default label."""
    label: Optional[str] = Field(default=None, max_length=60)


class ShoppingItemInput(BaseModel):
    name: str = Field(..., max_length=100)
    quantity: str = Field(default="", max_length=50)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = _strip(v)
        if not v:
            raise ValueError('Item name cannot be empty')
        return v


class TemplateInput(BaseModel):
    name: str = Field(default="", max_length=100)


class ThemeInput(BaseModel):
    theme: str = Field(..., min_length=1)
