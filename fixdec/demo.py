"""
Demo: Точное умножение двух пар десятичных литералов

Для каждой пары печатает:
    Result: <каноническая строка произведения>
    Expected: <ожидаемый литерал>

Ожидаемые значения записаны вручную и печатаются как есть, произведение не
нормализуется. Если ожидаемый литерал численно расходится с произведением,
расхождение пишется в лог (WARNING), код возврата остаётся 0.

Запуск:
    python -m fixdec.demo
    fixdec-demo
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from fixdec.core.domain import DecimalValue
from fixdec.core.exceptions import FormatError

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DemoCase:
    """Пара множителей и ожидаемое произведение (литералы)."""

    left: str
    right: str
    expected: str


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демо.

    По умолчанию две пары из исходного сценария проверки умножения.
    """

    cases: tuple[DemoCase, ...] = field(
        default_factory=lambda: (
            DemoCase(left="123.45", right="67.89", expected="8381.0505"),
            DemoCase(left="123.4", right="67.895", expected="8378.643"),
        )
    )
    # Уровень логирования console script, переопределяется FIXDEC_LOG_LEVEL
    log_level: str = field(default_factory=lambda: os.getenv("FIXDEC_LOG_LEVEL", "WARNING"))


# =============================================================================
# DEMO
# =============================================================================


def run_case(case: DemoCase) -> DecimalValue:
    """
    Разбор литералов пары и точное умножение.

    Raises:
        FormatError: Если один из литералов некорректен
    """
    left = DecimalValue.parse(case.left)
    right = DecimalValue.parse(case.right)
    product = left.multiply(right)
    logger.debug(
        "%s (scale=%d) * %s (scale=%d) = %s (scale=%d)",
        left, left.scale, right, right.scale, product, product.scale,
    )
    return product


def _matches_expected(product: DecimalValue, expected: str) -> bool:
    # Сравнение по значению: "8378.243" совпадает с "8378.2430"
    try:
        return product.compare_to(DecimalValue.parse(expected)) == 0
    except FormatError:
        return False


def main(
    config: Optional[DemoConfig] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Печать Result/Expected для всех пар конфигурации.

    Args:
        config: Конфигурация (по умолчанию DemoConfig())
        out: Поток вывода результатов (по умолчанию sys.stdout)
        err: Поток вывода ошибок (по умолчанию sys.stderr)

    Returns:
        0 при успешном завершении, 1 если литерал не разобран
    """
    config = config or DemoConfig()
    out = out or sys.stdout
    err = err or sys.stderr

    for case in config.cases:
        try:
            product = run_case(case)
        except FormatError as e:
            logger.error("Demo case %s * %s failed: %s", case.left, case.right, e)
            print(f"Error: {e}", file=err)
            return 1

        print(f"Result: {product.to_canonical_string()}", file=out)
        print(f"Expected: {case.expected}", file=out)

        if not _matches_expected(product, case.expected):
            logger.warning(
                "Expected %s differs from exact product %s of %s * %s",
                case.expected, product, case.left, case.right,
            )

    return 0


def run() -> None:
    """Точка входа console script."""
    config = DemoConfig()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(main(config))


if __name__ == "__main__":
    run()
