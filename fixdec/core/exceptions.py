"""
Exceptions: Иерархия ошибок fixdec

Все ошибки ядра наследуются от DecimalError, чтобы вызывающий код мог
перехватывать их одним except. Конкретные ошибки также наследуют
ValueError или ArithmeticError.
"""


class DecimalError(Exception):
    """Базовая ошибка десятичной арифметики fixdec."""

    pass


class FormatError(DecimalError, ValueError):
    """
    Строка не является корректным десятичным литералом.

    Грамматика литерала: [-]?digits[.digits]

    Возникает только при парсинге. Восстановления внутри ядра нет:
    ошибка сразу пробрасывается вызывающему коду.
    """

    def __init__(self, text: object, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal literal {text!r}: {reason}")


class RoundingNecessaryError(DecimalError, ArithmeticError):
    """
    Режим UNNECESSARY, но при изменении scale теряются ненулевые цифры.
    """

    pass
