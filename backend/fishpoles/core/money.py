from decimal import Decimal, ROUND_HALF_UP


def dollars_to_cents(amount: Decimal | float | int | str) -> int:
    """Converte valor em dólar para centavos inteiros (meio centavo: afasta do zero)."""
    value = Decimal(str(amount)) * 100
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def resolve_amount_cents(amount_cents: int | None, amount: Decimal | None) -> int | None:
    # amount_cents tem precedência; amount (dólar) é o fallback do formulário
    if amount_cents is not None:
        return int(amount_cents)
    if amount is not None:
        return dollars_to_cents(amount)
    return None
