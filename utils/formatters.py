# utils/formatters.py
CURRENCY_SYMBOL = "₽"

def plain_number(value: float) -> str:
    # 1000000 -> "1000000", 12.5 -> "12.5"; never scientific notation
    if value == int(value):
        return f"{value:.0f}"
    return f"{value}"

def money(value: float, currency: str = CURRENCY_SYMBOL, decimals: int = 2) -> str:
    # 5753.6 -> "5 753,60₽", 7192 -> "7 192₽" (ru-RU grouping)
    # Amounts are only rounded here, at display time.
    rounded = round(value, decimals)
    if rounded == int(rounded):
        text = f"{int(rounded):,}"
    else:
        text = f"{rounded:,.{decimals}f}"
    return text.replace(",", " ").replace(".", ",") + currency

def percent(value: float) -> str:
    return f"-{plain_number(value)}%"
