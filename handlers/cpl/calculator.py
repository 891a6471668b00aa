"""
Расчет максимального CPL для арбитражника

breakeven  = payout * approve% / (1 + trash%)  - CPL, при котором профит равен нулю
lead_price = breakeven / (1 + ROI%)            - CPL, дающий желаемый ROI
"""

import math
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional

import config
from utils.error_handler import (
    DegenerateInputError,
    InsufficientArgumentsError,
    NonNumericArgumentError
)
from .validators import parse_number, split_arguments

# Необязательные поля и их значения по умолчанию.
# Общие для /calc и пошагового мастера.
ECONOMICS_DEFAULTS = {
    'trash_rate': 0.0,
    'roi': 0.0,
}

# payout, approve_rate обязательны; trash_rate, roi - нет
ARGUMENT_ORDER = ('payout', 'approve_rate', 'trash_rate', 'roi')
REQUIRED_ARGUMENTS = 3


@dataclass(frozen=True)
class LeadEconomics:
    """Экономика лида: выплата и проценты аппрува, трэша и ROI"""
    payout: float
    approve_rate: float
    trash_rate: float = ECONOMICS_DEFAULTS['trash_rate']
    roi: float = ECONOMICS_DEFAULTS['roi']

    @classmethod
    def from_values(
        cls,
        payout: float,
        approve_rate: float,
        trash_rate: Optional[float] = None,
        roi: Optional[float] = None
    ) -> 'LeadEconomics':
        """Собирает экономику, подставляя значения по умолчанию вместо None"""
        values = {'trash_rate': trash_rate, 'roi': roi}
        for field_name, default in ECONOMICS_DEFAULTS.items():
            if values[field_name] is None:
                values[field_name] = default
        return cls(payout=payout, approve_rate=approve_rate, **values)


@dataclass(frozen=True)
class CPLResult:
    """Результат расчета"""
    breakeven: float
    lead_price: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.breakeven) and math.isfinite(self.lead_price)


def _divide(numerator: float, denominator: float) -> float:
    """Деление по правилам IEEE: x/0 -> ±inf, 0/0 -> nan"""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def round_cpl(value: float, decimals: Optional[int] = None) -> float:
    """
    Округляет половину от нуля (ROUND_HALF_UP) по десятичной записи числа

    Бесконечность и nan возвращаются как есть.
    """
    if not math.isfinite(value):
        return value
    if decimals is None:
        decimals = config.CPL_DECIMALS
    quantum = Decimal(1).scaleb(-decimals)
    # Точности хватает на любой конечный float
    exact = Decimal(repr(value))
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=Context(prec=400)))


def calculate_cpl(economics: LeadEconomics) -> CPLResult:
    """
    Рассчитывает CPL безубыточности и CPL под желаемый ROI

    Чистая функция, исключений не бросает. При трэше или ROI, равных -100%,
    результат получается бесконечным или nan - это проверяет вызывающий код.
    """
    approve = economics.approve_rate / 100
    trash = economics.trash_rate / 100
    roi = economics.roi / 100

    breakeven = _divide(economics.payout * approve, 1 + trash)
    lead_price = _divide(breakeven, 1 + roi)

    return CPLResult(
        breakeven=round_cpl(breakeven),
        lead_price=round_cpl(lead_price)
    )


def parse_one_shot_arguments(text: Optional[str]) -> LeadEconomics:
    """
    Разбирает аргументы /calc: <выплата> <аппрув%> <трэш%> [ROI%]

    Raises:
        InsufficientArgumentsError: меньше трех чисел
        NonNumericArgumentError: какой-то аргумент не число
    """
    tokens = split_arguments(text)
    if len(tokens) < REQUIRED_ARGUMENTS:
        raise InsufficientArgumentsError(REQUIRED_ARGUMENTS, len(tokens))

    values = {}
    # Лишние аргументы после ROI игнорируются
    for field_name, token in zip(ARGUMENT_ORDER, tokens):
        number = parse_number(token)
        if number is None:
            raise NonNumericArgumentError(token)
        values[field_name] = number

    return LeadEconomics.from_values(**values)


def evaluate(economics: LeadEconomics) -> CPLResult:
    """Считает CPL и пропускает только конечный результат"""
    result = calculate_cpl(economics)
    if not result.is_finite:
        raise DegenerateInputError(economics)
    return result


def compute_one_shot(text: Optional[str]) -> CPLResult:
    """Быстрый режим: аргументы одной строкой -> результат или ValidationError"""
    return evaluate(parse_one_shot_arguments(text))
