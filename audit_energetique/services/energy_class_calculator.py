# audit_energetique/services/energy_class_calculator.py
"""
Classement énergétique (BECTh) des bâtiments de bureaux.

BECTh = (BECh + BERef) / STC

- BECh : besoins annuels de chauffage (kWh/an)
- BERef : besoins annuels de refroidissement (kWh/an)
- STC : surface totale conditionnée (m²)

Seuls les bureaux / administrations / banques relèvent de ce classement.
"""

import logging

from ..constants import ENERGY_CLASS_APPLICABLE_TYPES, ENERGY_CLASS_THRESHOLDS
from ..contracts import EnergyClassResult
from ..enums import BuildingType

logger = logging.getLogger(__name__)


def _classify_becth(becth: float):
    for max_becth, energy_class, description in ENERGY_CLASS_THRESHOLDS:
        if becth <= max_becth:
            return energy_class, description

    _, energy_class, description = ENERGY_CLASS_THRESHOLDS[-1]
    return energy_class, description


def compute_energy_class(
    building_type: BuildingType,
    heating_load: float,
    cooling_load: float,
    conditioned_surface: float
) -> EnergyClassResult:
    """
    Calcule le BECTh et la classe énergétique.

    Args:
        building_type: Type de bâtiment
        heating_load: Besoin annuel de chauffage (kWh/an)
        cooling_load: Besoin annuel de froid (kWh/an)
        conditioned_surface: Surface conditionnée (m²)

    Returns:
        EnergyClassResult ; classe à None si non applicable ou surface invalide
    """
    if building_type not in ENERGY_CLASS_APPLICABLE_TYPES:
        return EnergyClassResult(
            is_applicable=False,
            becth=None,
            energy_class=None,
            class_description="Classement énergétique non applicable pour ce type de bâtiment",
        )

    if conditioned_surface <= 0:
        return EnergyClassResult(
            is_applicable=True,
            becth=None,
            energy_class=None,
            class_description="Surface conditionnée invalide",
        )

    becth = round((heating_load + cooling_load) / conditioned_surface, 2)
    energy_class, description = _classify_becth(becth)

    logger.info(f"🏢 BECTh {becth} kWh/m².an → {energy_class.value}")

    return EnergyClassResult(
        is_applicable=True,
        becth=becth,
        energy_class=energy_class,
        class_description=description,
    )
