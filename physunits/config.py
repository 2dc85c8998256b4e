"""Global configuration and type definitions for the physunits package.

This module centralizes the numeric type accepted wherever a plain scalar is
expected, the tolerances used by tolerance-based comparisons, and the key
names used by the serialization layer. Every other module reads these
constants instead of hard-coding them, so the numeric policy of the whole
library lives in one place.

Type Definitions:
    BASE_TYPE: Union type defining acceptable scalar types for construction,
               scaling and division. Supports Python native types (int, float)
               and NumPy scalar types so that values pulled out of arrays can
               be used directly.

Example:
    >>> from physunits.config import BASE_TYPE
    >>> import numpy as np
    >>> isinstance(np.float64(2.5), BASE_TYPE)
    True
    >>> isinstance(np.int32(7), BASE_TYPE)
    True
"""

from numpy import floating, integer

BASE_TYPE = int | float | integer | floating

# Tolerance-based comparison (Measurement.isclose, Temperature.isclose)
DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 0.0

# Serialization keys
BASE_VALUE_KEY = "baseValue"
KELVIN_VALUE_KEY = "kelvinValue"
FAMILY_KEY = "__physunits.family__"
