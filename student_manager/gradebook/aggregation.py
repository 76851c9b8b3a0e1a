# gradebook/aggregation.py
"""Рекурсивное суммирование оценок и пересчёт среднего балла.

Сумма считается по схеме «разделяй и властвуй»: последовательность делится
пополам, половины суммируются рекурсивно. Глубина рекурсии растёт как log(n),
поэтому длинные списки оценок не упираются в лимит рекурсии.

Порядок сложений отличается от обычного sum() слева направо, поэтому результат
может расходиться с ним в последнем бите float. Для среднего балла эта разница
несущественна.
"""
from typing import Optional, Sequence

def recursive_sum(values: Sequence[float], lo: int = 0, hi: Optional[int] = None) -> float:
    """Сумма values[lo:hi], вычисленная делением пополам."""
    if hi is None:
        hi = len(values)
    n = hi - lo
    if n <= 0:
        return 0.0
    if n == 1:
        return float(values[lo])
    mid = lo + n // 2
    return recursive_sum(values, lo, mid) + recursive_sum(values, mid, hi)

def recalc_average(grades: Sequence[float]) -> float:
    """Средний балл по оценкам. Возвращает 0.0, если оценок нет."""
    if not grades:
        return 0.0
    return recursive_sum(grades) / len(grades)
