from decimal import Decimal, ROUND_HALF_UP

PAISA = Decimal("0.01")

def to_money(amount) -> Decimal:
    """Round an amount to the paisa (half-up), the precision stored and printed on invoices."""
    if amount is None:
        return Decimal("0.00")
    return Decimal(str(amount)).quantize(PAISA, rounding=ROUND_HALF_UP)

def format_indian_currency(amount: Decimal) -> str:
    if amount is None:
        return "₹ 0.00"
    amount = to_money(amount)
    sign = "-" if amount < 0 else ""
    amount_str = f"{abs(amount):.2f}"
    integer_part, decimal_part = amount_str.split(".")

    if len(integer_part) <= 3:
        return f"₹ {sign}{integer_part}.{decimal_part}"

    last_three = integer_part[-3:]
    remaining = integer_part[:-3]

    # lakh grouping: 12,34,567
    formatted_remaining = ""
    while len(remaining) > 2:
        formatted_remaining = "," + remaining[-2:] + formatted_remaining
        remaining = remaining[:-2]

    formatted_remaining = remaining + formatted_remaining

    return f"₹ {sign}{formatted_remaining},{last_three}.{decimal_part}"

UNITS = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine", "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen"]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

def _convert(num: int) -> str:
    if num < 20:
        return UNITS[num]
    elif num < 100:
        return TENS[num // 10] + (" " + UNITS[num % 10] if num % 10 != 0 else "")
    elif num < 1000:
        return UNITS[num // 100] + " Hundred" + (" " + _convert(num % 100) if num % 100 != 0 else "")
    elif num < 100000:
        return _convert(num // 1000) + " Thousand" + (" " + _convert(num % 1000) if num % 1000 != 0 else "")
    elif num < 10000000:
        return _convert(num // 100000) + " Lakh" + (" " + _convert(num % 100000) if num % 100000 != 0 else "")
    else:
        return _convert(num // 10000000) + " Crore" + (" " + _convert(num % 10000000) if num % 10000000 != 0 else "")

def amount_to_words(amount) -> str:
    """
    Render an amount the way it is printed on an Indian tax invoice.

    11800 -> "Eleven Thousand Eight Hundred Rupees Only"
    1250.50 -> "One Thousand Two Hundred Fifty Rupees and Fifty Paise Only"
    """
    if amount is None:
        return ""
    amount = to_money(amount)
    if amount < 0:
        return "Minus " + amount_to_words(-amount)

    rupees = int(amount)
    paise = int((amount - rupees) * 100)

    if rupees == 0 and paise == 0:
        return "Zero Rupees Only"

    parts = []
    if rupees:
        parts.append(_convert(rupees) + (" Rupee" if rupees == 1 else " Rupees"))
    if paise:
        parts.append(_convert(paise) + " Paise")

    return " and ".join(parts) + " Only"
