import hashlib

from .models import ExpenseRecord


def generate_fingerprint(record: ExpenseRecord) -> str:
    """Generate a deterministic SHA256 fingerprint for an expense record.

        SHA256(date|amount:.2f|MERCHANT|DESCRIPTION|PAYMENT_METHOD|USER)

    String fields are trimmed and uppercased so re-uploads of the same
    receipt collide regardless of OCR casing. The source excerpt is not
    hashed.

    Returns:
        64-character lowercase hex SHA256 hash.
    """
    normalized_amount = f"{record.amount:.2f}"
    normalized_merchant = record.merchant.strip().upper()
    normalized_description = record.short_description.strip().upper()
    normalized_payment = record.payment_method.strip().upper()
    normalized_user = record.user.strip().upper()

    raw = (
        f"{record.date}|{normalized_amount}|{normalized_merchant}"
        f"|{normalized_description}|{normalized_payment}|{normalized_user}"
    )
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()
