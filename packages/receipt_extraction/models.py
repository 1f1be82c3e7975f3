"""Typed output of the extraction engine.

Categories and payment methods carry the Brazilian-Portuguese ledger labels
users see. The "not determined" sentinels are fixed English markers that
callers compare against before deciding to reject or warn.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MERCHANT_NOT_IDENTIFIED = "Establishment not identified"
DESCRIPTION_UNAVAILABLE = "Description unavailable"
PAYMENT_NOT_IDENTIFIED = "Not identified"

EXCERPT_LENGTH = 500


class Category(str, Enum):
    """Closed set of expense categories, in rule-table order."""

    FOOD = "Alimentação"
    TRANSPORT = "Transporte"
    HOUSING = "Moradia"
    LEISURE = "Lazer"
    HEALTH = "Saúde"
    OTHER = "Other"


class PaymentMethod(str, Enum):
    PIX = "PIX"
    DEBIT = "Débito"
    CREDIT = "Crédito"
    CASH = "Dinheiro"
    BOLETO = "Boleto"
    TRANSFER = "Transferência"


class ExpenseRecord(BaseModel):
    """One ledger entry built from a single document's text."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    date: str = Field(..., pattern=r"^\d{2}/\d{2}/\d{4}$", description="DD/MM/YYYY")
    user: str
    merchant: str = MERCHANT_NOT_IDENTIFIED
    amount: float = Field(default=0.0, ge=0)
    category: Category = Category.OTHER
    short_description: str = DESCRIPTION_UNAVAILABLE
    payment_method: str = PAYMENT_NOT_IDENTIFIED
    source_excerpt: str = Field(default="", max_length=EXCERPT_LENGTH)

    @property
    def amount_found(self) -> bool:
        return self.amount > 0

    def to_dict(self) -> dict:
        """Convert to a plain dict for persistence or JSON responses."""
        return self.model_dump()
