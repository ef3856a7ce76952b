import math
from typing import Any, Dict, Iterable, List, Mapping

from app.models.enums import Frequency

# Tope de montos aceptados por la API (cuentas, ingresos, gastos)
MAX_AMOUNT = 1e12

MONTHLY_FACTORS: Mapping[str, float] = {
    Frequency.monthly.value: 1,
    Frequency.quarterly.value: 1 / 3,
    Frequency.annual.value: 1 / 12,
    Frequency.one_time.value: 0,
}


def get_field(item: Any, key: str, default: Any = None) -> Any:
    """Lee un campo de un dict o de un objeto (modelo SQLModel, schema...)."""
    if item is None:
        return default
    if isinstance(item, Mapping):
        return item.get(key, default)
    return getattr(item, key, default)


def to_number(value: Any) -> float:
    """
    Conversión tolerante: None, textos no numéricos, NaN e infinitos cuentan como 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def to_monthly_amount(amount: Any, frequency: Any = Frequency.monthly) -> float:
    """Equivalente mensual de un monto según su frecuencia (factor 1 si es desconocida)."""
    if isinstance(frequency, Frequency):
        frequency = frequency.value
    factor = MONTHLY_FACTORS.get(frequency, 1)
    return to_number(amount) * factor


def _sum_amounts(values: Iterable[float]) -> float:
    # fsum: resultado exacto e independiente del orden de los registros
    values = list(values)
    try:
        return math.fsum(values)
    except OverflowError:
        # la suma excede el rango de float: sum() devuelve inf en vez de fallar
        return sum(values, 0.0)


def sum_monthly_equivalent(
    items: Iterable[Any],
    amount_key: str = "amount",
    frequency_key: str = "frequency",
) -> float:
    return _sum_amounts(
        to_monthly_amount(get_field(item, amount_key, 0), get_field(item, frequency_key)) for item in items or []
    )


def total_balance(accounts: Iterable[Any]) -> float:
    return _sum_amounts(to_number(get_field(acc, "balance", 0)) for acc in accounts or [])


def group_monthly_by(items: Iterable[Any], key: str) -> List[Dict[str, Any]]:
    """
    Agrupa los equivalentes mensuales por el valor de `key`,
    conservando el orden de primera aparición.
    """
    totals: Dict[str, float] = {}
    for item in items or []:
        name = get_field(item, key)
        totals[name] = totals.get(name, 0.0) + sum_monthly_equivalent([item])
    return [{"name": name, "value": value} for name, value in totals.items()]
