"""Domain models for payment plans."""

from pydantic import BaseModel, ConfigDict, Field


class Plan(BaseModel):
    """
    Merchant-defined recurring charge template.

    Plans are immutable once created: the registry never updates or removes them.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    token: str
    amount: int = Field(gt=0)  # Charged once per billing cycle
    frequency: int = Field(gt=0)  # Billing cycle length in seconds
    merchant: str
    created_at: int


class PlanCreateModel(BaseModel):
    """Model for creating a new plan. The registry assigns the id."""

    token: str
    amount: int = Field(gt=0)
    frequency: int = Field(gt=0)
    merchant: str
    created_at: int
