"""Domain constants for the medical transfers ledger."""

from decimal import Decimal

TIER_1 = "tier1"
TIER_2 = "tier2"
TIER_3 = "tier3"
EXPENSE_TIER = "expense"

INCOME_TIERS = (TIER_1, TIER_2, TIER_3)
OPTION_TYPES = (*INCOME_TIERS, EXPENSE_TIER)

TIER_DISCOUNT_PERCENTAGES = {
    TIER_1: Decimal("16.33"),
    TIER_2: Decimal("10.93"),
    TIER_3: Decimal("10.93"),
}

PAYMENT_CASH = "cash"
PAYMENT_PIX = "pix"
PAYMENT_DEBIT = "debit"
PAYMENT_CREDIT = "credit"

PAYMENT_METHODS = (PAYMENT_CASH, PAYMENT_PIX, PAYMENT_DEBIT, PAYMENT_CREDIT)

PAYMENT_DISCOUNT_PERCENTAGES = {
    PAYMENT_CASH: Decimal("0"),
    PAYMENT_PIX: Decimal("0"),
    PAYMENT_DEBIT: Decimal("1.70"),
    PAYMENT_CREDIT: Decimal("2.50"),
}

TIER_CATEGORIES = {
    TIER_1: (
        "Consulta",
        "Onda de choque",
        "Retirada de pontos",
        "Medicação",
        "Coleta de sangue",
        "Outros",
    ),
    TIER_2: (
        "Infiltração",
        "Viscossuplementação",
        "Cirurgia",
        "Outros",
    ),
    TIER_3: (
        "UDI",
        "HSD",
        "Natus Lumine",
        "Dom Hospital",
        "Centro Médico",
        "Outros",
    ),
}

TIER_LABELS = {
    TIER_1: "Procedimentos Básicos",
    TIER_2: "Procedimentos Especiais",
    TIER_3: "Hospitais",
    EXPENSE_TIER: "Despesas",
}

PAYMENT_METHOD_LABELS = {
    PAYMENT_CASH: "Dinheiro",
    PAYMENT_PIX: "PIX",
    PAYMENT_DEBIT: "Cartão de Débito",
    PAYMENT_CREDIT: "Cartão de Crédito",
}

FALLBACK_EXPENSE_CATEGORY = "outros"

EXPENSE_CATEGORY_LABELS = {
    "rateio_mensal": "Rateio Mensal",
    "medicacao": "Medicação",
    "insumo": "Insumo",
    "repasse_medico": "Repasse Médico",
    FALLBACK_EXPENSE_CATEGORY: "Outros",
}

SOURCE_TRANSFER = "transfer"
SOURCE_INDEPENDENT = "independent"
EXPENSE_SOURCES = (SOURCE_TRANSFER, SOURCE_INDEPENDENT)

ORIGIN_MANUAL = "manual"
ORIGIN_SYSTEM = "system"

IMPUTED_MARKER = "lançado via sistema"

DEFAULT_DOCTOR_LEDGER_CATEGORY = "repasse_medico"


__all__ = [
    "TIER_1",
    "TIER_2",
    "TIER_3",
    "EXPENSE_TIER",
    "INCOME_TIERS",
    "OPTION_TYPES",
    "TIER_DISCOUNT_PERCENTAGES",
    "PAYMENT_CASH",
    "PAYMENT_PIX",
    "PAYMENT_DEBIT",
    "PAYMENT_CREDIT",
    "PAYMENT_METHODS",
    "PAYMENT_DISCOUNT_PERCENTAGES",
    "TIER_CATEGORIES",
    "TIER_LABELS",
    "PAYMENT_METHOD_LABELS",
    "FALLBACK_EXPENSE_CATEGORY",
    "EXPENSE_CATEGORY_LABELS",
    "SOURCE_TRANSFER",
    "SOURCE_INDEPENDENT",
    "EXPENSE_SOURCES",
    "ORIGIN_MANUAL",
    "ORIGIN_SYSTEM",
    "IMPUTED_MARKER",
    "DEFAULT_DOCTOR_LEDGER_CATEGORY",
]
