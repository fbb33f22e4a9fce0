"""
Keypad for BonCalc
Maps key labels to calculator engine actions
"""
from calculator import Operator

KEYPAD_LAYOUT = [
    ["AC", "±", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "−"],
    ["1", "2", "3", "+"],
    ["0", ".", "="],
]

DIGITS = "0123456789"

OPERATOR_KEYS = {
    "+": Operator.ADD,
    "−": Operator.SUBTRACT,
    "-": Operator.SUBTRACT,
    "×": Operator.MULTIPLY,
    "*": Operator.MULTIPLY,
    "÷": Operator.DIVIDE,
    "/": Operator.DIVIDE,
    "=": Operator.EQUALS,
}

FUNCTION_KEYS = {
    "AC": "reset",
    "C": "reset",
    "±": "toggle_sign",
    "+/-": "toggle_sign",
    "%": "apply_percentage",
    ".": "enter_decimal_point",
    ",": "enter_decimal_point",
}


def key_kind(key):
    """Return "digit", "point", "operator" or "function" for a layout label"""
    if len(key) == 1 and key in DIGITS:
        return "digit"
    if key in (".", ","):
        return "point"
    if key in OPERATOR_KEYS:
        return "operator"
    return "function"


def press(engine, key):
    """Apply a key to the engine and return the new display text"""
    key = str(key).strip()

    if len(key) == 1 and key in DIGITS:
        engine.enter_digit(int(key))
    elif key in OPERATOR_KEYS:
        engine.apply_operator(OPERATOR_KEYS[key])
    elif key in FUNCTION_KEYS:
        getattr(engine, FUNCTION_KEYS[key])()
    else:
        raise ValueError(f"Unknown key: {key!r}")

    return engine.display_string()
