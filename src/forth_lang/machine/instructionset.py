from .instruction import Instruction as I

__all__ = [
    "PushV",
    "Plus",
    "Minus",
    "Multiply",
    "Divide",
    "Dup",
    "Drop",
    "Swap",
    "Over",
]

##± Data Access ±###############################################################


class PushV(I):
    """Push an immediate (literal) value onto the stack"""

    num_ops = 1
    op_types = [int]


##± Arithmetic ±################################################################


class Plus(I):
    """Add the top two elements on the stack"""

    arity = 2


class Minus(I):
    """Subtract the top element from the one below it"""

    arity = 2


class Multiply(I):
    """Multiply the top two elements on the stack"""

    arity = 2


class Divide(I):
    """Divide the second element by the top element, truncating toward zero"""

    arity = 2


##± Stack Manipulation ±########################################################


class Dup(I):
    """Duplicate the top element"""

    arity = 1


class Drop(I):
    """Remove the top element and discard it"""

    arity = 1


class Swap(I):
    """Exchange the top two elements"""

    arity = 2


class Over(I):
    """Copy the second element onto the top"""

    arity = 2
