"""The Forth machine Instruction class"""

from ..exceptions import UnexpectedError


class BadOperandsLength(UnexpectedError):
    """Wrong number of operands for instruction"""

    def __init__(self, instr_name: str, num_ops: int, expected_num: int):
        msg = (
            f"Wrong number of operands ({num_ops}, expected {expected_num}) "
            f"for {instr_name.upper()}."
        )
        super().__init__(msg)


class BadOperandsType(UnexpectedError):
    """Bad operand type(s) for instruction"""

    def __init__(self, instr_name: str, got, expected, pos: int):
        msg = (
            f"Wrong operand type (got {got}, expected {expected} "
            f"in position {pos}) for {instr_name.upper()}."
        )
        super().__init__(msg)


class Instruction:
    """A Forth machine instruction

    arity is the number of values the instruction needs on the stack.
    """

    num_ops = 0
    op_types = None
    arity = 0

    def __init__(self, *operands):
        self.name = type(self).__name__

        if len(operands) != self.num_ops:
            raise BadOperandsLength(self.name, len(operands), self.num_ops)

        if self.op_types:
            for idx, (a, b) in enumerate(zip(operands, self.op_types)):
                # bool is an int subclass, but never a valid cell
                if not isinstance(a, b) or isinstance(a, bool):
                    raise BadOperandsType(self.name, type(a), b, idx)

        self.operands = operands

    def __repr__(self):
        ops = ", ".join(map(str, self.operands))
        name = self.name.upper()
        return f"{name:8} {ops}".rstrip()

    def __eq__(self, other):
        return type(self) == type(other) and self.operands == other.operands

    def __hash__(self):
        return hash((type(self), self.operands))
