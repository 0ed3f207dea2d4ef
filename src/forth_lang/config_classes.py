"""forth_lang configuration data, usually stored in forth.toml"""

from dataclasses import dataclass

# Constants
DEFAULT_CELL_BITS = 32
MIN_CELL_BITS = 16


@dataclass(frozen=True)
class EvaluatorConfig:
    cell_bits: int = DEFAULT_CELL_BITS

    def __post_init__(self):
        if type(self.cell_bits) is not int or self.cell_bits < MIN_CELL_BITS:
            raise ValueError(
                f"cell_bits must be an integer >= {MIN_CELL_BITS}, "
                f"got {self.cell_bits!r}"
            )

    @property
    def min_value(self) -> int:
        return -(1 << (self.cell_bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.cell_bits - 1)) - 1

    def in_range(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value
