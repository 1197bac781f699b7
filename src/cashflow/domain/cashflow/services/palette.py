"""Color hints attached to cash-flow nodes."""

INCOME_COLOR = "#10b981"  # emerald-500
INCOME_CATEGORY_COLOR = "#22c55e"  # green-500
BUDGET_COLOR = "#3b82f6"  # blue-500
SAVINGS_COLOR = "#22c55e"  # green-500

DEFAULT_MAJOR_COLOR = "#dc2626"  # red-600
DEFAULT_CATEGORY_COLOR = "#f97316"  # orange-500

MAJOR_CATEGORY_COLORS: dict[str, str] = {
    "Custos Fixos": "#ef4444",
    "Custos Variaveis": "#f97316",
    "Custos Variáveis": "#f97316",
    "Gastos sem culpa": "#f59e0b",
    "Gastos sem Culpa": "#f59e0b",
    "Economia e Investimentos": "#06b6d4",
}

CATEGORY_COLORS: dict[str, str] = {
    "Alimentação": "#fb923c",
    "Transportes": "#fbbf24",
    "Habitação": "#f87171",
    "Saúde": "#fb7185",
    "Educação": "#f472b6",
    "Lazer": "#e879f9",
}


def major_category_color(name: str) -> str:
    return MAJOR_CATEGORY_COLORS.get(name, DEFAULT_MAJOR_COLOR)


def category_color(name: str) -> str:
    return CATEGORY_COLORS.get(name, DEFAULT_CATEGORY_COLOR)
