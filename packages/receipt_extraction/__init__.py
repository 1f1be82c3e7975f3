"""
SCALE Receipt Extraction

Field extraction and categorization for OCR'd receipts and PDF invoices.
"""

__version__ = "0.1.0"

from .assembler import assemble, assemble_many, extract_financial_data
from .clock import Clock, fixed_clock, system_clock
from .date_extractor import extract_date
from .description_extractor import extract_description
from .fingerprint import generate_fingerprint
from .merchant_extractor import MerchantExtractor, extract_establishment
from .models import Category, ExpenseRecord, PaymentMethod
from .payment_method import extract_payment_method
from .rules import KeywordCategorizer, categorize_expense
from .value_extractor import MonetaryCandidate, collect_candidates, extract_value, select_total

__all__ = [
    "assemble",
    "assemble_many",
    "extract_financial_data",
    "Clock",
    "fixed_clock",
    "system_clock",
    "extract_date",
    "extract_description",
    "generate_fingerprint",
    "MerchantExtractor",
    "extract_establishment",
    "Category",
    "ExpenseRecord",
    "PaymentMethod",
    "extract_payment_method",
    "KeywordCategorizer",
    "categorize_expense",
    "MonetaryCandidate",
    "collect_candidates",
    "extract_value",
    "select_total",
]
