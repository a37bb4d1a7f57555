"""
Core math modules для radix converter

Арифметика произвольной точности на limb-представлении.
"""

# Limb array (внутреннее big-integer представление)
from src.core.math.limbs import (
    # Constants
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    # Types
    LimbArray,
)

__all__ = [
    # Limb array — Constants
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # Limb array — Types
    "LimbArray",
]
