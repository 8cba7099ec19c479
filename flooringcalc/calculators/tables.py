"""
Lookup tables and unit prices shared across calculator families.

Tables used by a single calculator live next to it as module constants.
Every table must cover every option its form allows; a missing key is a bug,
caught by the enumeration tests, not a runtime condition.
"""

from typing import Literal

# Room complexity as asked by the cost and plank calculators
RoomComplexity = Literal["simple", "moderate", "complex"]

COMPLEXITY_MULTIPLIERS = {
    "simple": 1.0,
    "moderate": 1.3,
    "complex": 1.6,
}

# The five flooring families the general-purpose calculators offer
FlooringType = Literal["tile", "hardwood", "vinyl", "laminate", "carpet"]

TRANSITION_STRIP_PRICE = 25.00
NAIL_BOX_PRICE = 8.50
CAULK_TUBE_PRICE = 4.25

# Underlayment/moisture barrier roll-out allowances
UNDERLAYMENT_OVERLAP = 1.05
MOISTURE_BARRIER_OVERLAP = 1.1

# Installed labor rate for repair work, $/hour
REPAIR_LABOR_RATE = 65.00
