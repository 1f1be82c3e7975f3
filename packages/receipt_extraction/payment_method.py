from .models import PAYMENT_NOT_IDENTIFIED, PaymentMethod

# Checked in this order; the first label with any substring present wins,
# wherever it appears in the text.
PAYMENT_RULES = (
    (PaymentMethod.PIX, ("pix",)),
    (PaymentMethod.DEBIT, ("débito", "debito")),
    (PaymentMethod.CREDIT, ("crédito", "credito")),
    (PaymentMethod.CASH, ("dinheiro", "espécie")),
    (PaymentMethod.BOLETO, ("boleto",)),
    (PaymentMethod.TRANSFER, ("transferência", "ted", "doc")),
)


def extract_payment_method(text: str) -> str:
    """Payment method label, or "Not identified"."""
    text_lower = (text or "").lower()
    for method, needles in PAYMENT_RULES:
        if any(needle in text_lower for needle in needles):
            return method.value
    return PAYMENT_NOT_IDENTIFIED
