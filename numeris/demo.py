"""
Demo — интегрирование sinc(x) и сравнение с эталоном

Пример использования публичного API: вычисление ∫ sin(x)/x dx на [0.001, 2]
и вывод относительной/процентной ошибки относительно известного значения.
Интеграл начинается с 0.001, так как sinc(x) делит на x.

Запуск:
    python -m numeris
    python -m numeris --rule trapezoidal --steps 2000 --json
"""

import argparse
import json
import logging
from dataclasses import asdict, dataclass
from typing import Final, Sequence

from numeris.core.contracts import validate_quadrature_report
from numeris.core.errors import NumericsError
from numeris.core.math import (
    DEFAULT_SPACING,
    QuadratureRule,
    SpacingMode,
    integrate,
    percentage_error,
    relative_error,
    sinc_x,
)
from numeris.logging_config import enable_console_logging

logger = logging.getLogger(__name__)

# Значение ∫_0^2 sin(x)/x dx (WolframAlpha)
REFERENCE_SINC_INTEGRAL: Final[float] = 1.60441

DEFAULT_LOWER: Final[float] = 0.001
DEFAULT_UPPER: Final[float] = 2.0
DEFAULT_STEPS: Final[int] = 10000


@dataclass(frozen=True)
class QuadratureReport:
    """Результат одного прогона квадратуры против эталона."""

    rule: str
    spacing: str
    lower: float
    upper: float
    steps: int
    value: float
    reference: float
    relative_error: float
    percentage_error: float

    def to_dict(self) -> dict:
        return asdict(self)


def run(
    rule: QuadratureRule = QuadratureRule.SIMPSONS,
    lower: float = DEFAULT_LOWER,
    upper: float = DEFAULT_UPPER,
    steps: int = DEFAULT_STEPS,
    spacing: SpacingMode = DEFAULT_SPACING,
    reference: float = REFERENCE_SINC_INTEGRAL,
) -> QuadratureReport:
    """
    Интегрирование sinc(x) и сравнение с reference.

    Raises:
        InvalidBounds, InvalidStepCount: Некорректный запрос квадратуры
        DivisionByZero: reference == 0
    """
    rule = QuadratureRule(rule)
    spacing = SpacingMode(spacing)

    value = integrate(sinc_x, lower, upper, steps, rule=rule, spacing=spacing)

    report = QuadratureReport(
        rule=rule.value,
        spacing=spacing.value,
        lower=lower,
        upper=upper,
        steps=steps,
        value=value,
        reference=reference,
        relative_error=relative_error(value, reference),
        percentage_error=percentage_error(value, reference),
    )
    validate_quadrature_report(report.to_dict())
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numeris",
        description="Integrate sin(x)/x and compare against a known reference value",
    )
    parser.add_argument(
        "--rule",
        choices=[r.value for r in QuadratureRule],
        default=QuadratureRule.SIMPSONS.value,
        help="Quadrature rule",
    )
    parser.add_argument(
        "--spacing",
        choices=[s.value for s in SpacingMode],
        default=DEFAULT_SPACING.value,
        help="Sample point spacing mode",
    )
    parser.add_argument("--lower", type=float, default=DEFAULT_LOWER, help="Lower bound")
    parser.add_argument("--upper", type=float, default=DEFAULT_UPPER, help="Upper bound")
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS, help="Even step count")
    parser.add_argument(
        "--reference",
        type=float,
        default=REFERENCE_SINC_INTEGRAL,
        help="Known value of the integral",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        enable_console_logging(level="DEBUG")

    try:
        report = run(
            rule=QuadratureRule(args.rule),
            lower=args.lower,
            upper=args.upper,
            steps=args.steps,
            spacing=SpacingMode(args.spacing),
            reference=args.reference,
        )
    except (NumericsError, ValueError) as e:
        # exit code 2 + usage
        parser.error(str(e))

    logger.debug("report: %s", report)

    if args.json:
        print(json.dumps(report.to_dict()))
    else:
        print(f"Integral from {report.lower} to {report.upper} of sinc(x): {report.value}")
        print(f"Relative error: {report.relative_error}")
        print(f"Percentage error: {report.percentage_error}%")
    return 0
