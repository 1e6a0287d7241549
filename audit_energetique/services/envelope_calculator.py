# audit_energetique/services/envelope_calculator.py
"""
Facteurs d'enveloppe et de compacité du bâtiment.
"""

from ..constants import (
    INSULATION_FACTORS,
    GLAZING_FACTORS,
    VENTILATION_FACTORS,
    COMPACTNESS_FACTORS,
    FOUR_OR_MORE_FLOORS_THRESHOLD,
    TWO_OR_THREE_FLOORS_THRESHOLD,
)
from ..enums import InsulationQuality, GlazingType, VentilationSystem, FloorBand


def compute_envelope_factor(
    insulation: InsulationQuality,
    glazing: GlazingType,
    ventilation: VentilationSystem
) -> float:
    """
    F_enveloppe = F_isolation × F_vitrage × F_VMC
    """
    return (
        INSULATION_FACTORS[insulation]
        * GLAZING_FACTORS[glazing]
        * VENTILATION_FACTORS[ventilation]
    )


def compute_compactness_factor(floors: int) -> float:
    """Plus d'étages = meilleure compacité = facteur plus faible."""
    if floors >= FOUR_OR_MORE_FLOORS_THRESHOLD:
        return COMPACTNESS_FACTORS[FloorBand.FOUR_OR_MORE]

    if floors >= TWO_OR_THREE_FLOORS_THRESHOLD:
        return COMPACTNESS_FACTORS[FloorBand.TWO_OR_THREE]

    return COMPACTNESS_FACTORS[FloorBand.SINGLE]
