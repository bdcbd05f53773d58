# Global configuration for secret recovery
import sys

class Config:
    # Input document
    CONTROL_KEY = "keys"  # Reserved key holding {"n": ..., "k": ...}
    MIN_BASE = 2
    MAX_BASE = 36

    # Share selection: "sorted" takes the k smallest x values,
    # "document" takes the first k records in file order
    SELECTION_ORDER = "sorted"

    # Interpolation
    STRICT_DIVISION = False  # Raise instead of warning on a non-exact Lagrange term

    # Reporting
    VERBOSE = True
    TABLE_FORMAT = "simple"
    VALUE_PREVIEW = 32  # Digits of y shown in the points table

    # Research parameters
    PERFORMANCE_SAMPLES = 100  # For benchmarking
    PERFORMANCE_THRESHOLDS = [2, 3, 5, 10, 20]
    PERFORMANCE_COEFFICIENT_BITS = 256

    @classmethod
    def supported_bases(cls):
        return range(cls.MIN_BASE, cls.MAX_BASE + 1)

# Shares and secrets are unbounded; lift the decimal conversion cap
sys.set_int_max_str_digits(0)
