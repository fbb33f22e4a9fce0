"""
Calculator Engine for BonCalc
Holds the operand, the running result and the pending operator
"""
import math
from decimal import Context, Decimal, ROUND_HALF_EVEN
from enum import Enum

import config


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"
    EQUALS = "="


def _divide(dividend, divisor):
    """IEEE division: x/0 gives a signed infinity, 0/0 gives NaN"""
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def format_number(value, max_fraction_digits=config.MAX_FRACTION_DIGITS,
                  grouping=config.USE_GROUPING,
                  significant_digits=config.SIGNIFICANT_DIGITS):
    """
    Format a float the way it was typed (e.g. 8.0 -> "8", 2.3 -> "2.3").

    Starts from the shortest round-trip text of the float, rounds it to
    `significant_digits` and then to `max_fraction_digits` places, and drops
    trailing zeros. 3 + 7 * 0.1 shows as "3.7", not "3.7000000000000002".
    """
    if math.isnan(value):
        return config.NAN_TEXT
    if math.isinf(value):
        return config.INFINITY_TEXT if value > 0 else "-" + config.INFINITY_TEXT

    context = Context(prec=significant_digits, rounding=ROUND_HALF_EVEN)
    number = context.create_decimal(repr(value))
    if number.as_tuple().exponent < -max_fraction_digits:
        number = number.quantize(Decimal(1).scaleb(-max_fraction_digits),
                                 rounding=ROUND_HALF_EVEN)

    text = format(number, ",f" if grouping else "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class CalculatorEngine:
    def __init__(self):
        self.reset()

    def reset(self):
        """Clear everything (AC)"""
        self.input = 0.0
        self.accumulator = 0.0
        self.pending_operator = None
        self.is_decimal_mode = False
        self.decimal_scale = 0.1

    def enter_digit(self, digit):
        """Append a digit to the operand under construction"""
        if self.is_decimal_mode:
            self.input += digit * self.decimal_scale
            self.decimal_scale /= 10
        else:
            self.input = self.input * 10 + digit

    def enter_decimal_point(self):
        """Switch to fractional entry; the scale is left as it is"""
        self.is_decimal_mode = True

    def toggle_sign(self):
        self.input = -self.input

    def apply_percentage(self):
        self.input = self.input / 100

    def commit_pending(self):
        """Fold the operand into the accumulator using the pending operator"""
        op = self.pending_operator
        if op is Operator.ADD:
            self.accumulator += self.input
        elif op is Operator.SUBTRACT:
            self.accumulator -= self.input
        elif op is Operator.MULTIPLY:
            self.accumulator *= self.input
        elif op is Operator.DIVIDE:
            self.accumulator = _divide(self.accumulator, self.input)
        else:
            # EQUALS or nothing pending: the operand becomes the result
            self.accumulator = self.input

        self.is_decimal_mode = False
        self.decimal_scale = 0.1

    def apply_operator(self, operator):
        """
        Resolve the pending operator, then make `operator` the pending one.

        After EQUALS the result moves into the operand so it can be shown and
        chained; any other operator clears the operand for the next number.
        """
        self.commit_pending()
        self.pending_operator = operator

        if operator is Operator.EQUALS:
            self.input = self.accumulator
            self.accumulator = 0.0
        else:
            self.input = 0.0

    def display_string(self):
        """Text for the display label"""
        text = format_number(self.input)

        # Point pressed but no fractional digit shown yet: keep the marker visible
        if self.is_decimal_mode and self.decimal_scale > 0.01:
            text += "."

        return text
