# audit_energetique/services/equipment_calculator.py
"""
Charges des équipements spécifiques (process, froid, cuisine...).

Le froid obligatoire des pharmacies est calculé à part par
``compute_pharmacy_cold_load`` ; c'est ``AuditEnergetiqueCalculator``
qui l'ajoute lorsque le bâtiment est une pharmacie.
"""

import logging
from typing import Iterable

from ..constants import EQUIPMENT_LOADS, PHARMACY_COLD_THRESHOLDS
from ..contracts import LoadResult
from ..enums import BuildingType, EquipmentCategory

logger = logging.getLogger(__name__)


def compute_equipment_loads(
    building_type: BuildingType,
    categories: Iterable[EquipmentCategory],
    usage_factor: float,
    process_factor: float,
    surface: float
) -> LoadResult:
    """
    Somme les charges par m² des catégories d'équipements sélectionnées.

    Les équipements 24h/24 (froid industriel) ne suivent pas les horaires
    d'ouverture ; les autres sont pondérés par l'usage et le process.
    Les catégories absentes de la table sont ignorées.

    Args:
        building_type: Type de bâtiment
        categories: Catégories d'équipements déclarées
        usage_factor: Facteur d'usage (0-1)
        process_factor: Facteur process du type de bâtiment
        surface: Surface (m²)

    Returns:
        LoadResult (absolute_kwh toujours à 0 à ce niveau)
    """
    selected = set(categories)
    per_square = 0.0

    unknown = selected.difference(EQUIPMENT_LOADS)
    if unknown:
        logger.debug(f"  Catégories ignorées : {unknown}")

    # Parcours dans l'ordre de la table : somme déterministe
    for category, load in EQUIPMENT_LOADS.items():
        if category not in selected:
            continue

        if load.is_24h:
            per_square += load.value
        else:
            per_square += load.value * usage_factor * process_factor

    return LoadResult(per_square=per_square, absolute_kwh=0.0)


def compute_pharmacy_cold_load(surface: float) -> float:
    """
    Besoin annuel de réfrigération obligatoire d'une pharmacie (kWh/an).

    Retourne la valeur du premier seuil de surface non dépassé.
    """
    for max_surface, energy in PHARMACY_COLD_THRESHOLDS:
        if surface <= max_surface:
            return energy

    return PHARMACY_COLD_THRESHOLDS[-1][1]
