# audit_energetique/services/ecs_calculator.py
"""
Calcul de l'eau chaude sanitaire (ECS).
"""

from ..contracts import LoadResult
from ..enums import DomesticHotWaterType


def compute_domestic_hot_water_load(
    ecs_type: DomesticHotWaterType,
    reference: float,
    usage_factor: float,
    gas_efficiency: float,
    solar_coverage: float,
    solar_appoint_efficiency: float,
    heat_pump_cop: float
) -> LoadResult:
    """
    Consommation ECS par m² selon le système de production.

    - Électrique : besoin utile
    - Gaz : besoin utile / rendement chaudière
    - Solaire : seul l'appoint (1 - couverture) / rendement appoint
    - PAC : besoin utile / COP

    Args:
        ecs_type: Système de production ECS
        reference: Besoin de référence du type de bâtiment (kWh/m²/an)
        usage_factor: Facteur d'usage ECS du type de bâtiment
        gas_efficiency: Rendement de la chaudière gaz
        solar_coverage: Taux de couverture solaire (0-1)
        solar_appoint_efficiency: Rendement de l'appoint solaire
        heat_pump_cop: COP de la pompe à chaleur

    Returns:
        LoadResult ; absolute_kwh reste à 0 (multiplication par la surface
        faite par l'appelant)
    """
    if ecs_type == DomesticHotWaterType.NONE:
        return LoadResult(per_square=0.0, absolute_kwh=0.0)

    ecs_utile = reference * usage_factor

    if ecs_type == DomesticHotWaterType.GAS:
        per_square = ecs_utile / gas_efficiency
    elif ecs_type == DomesticHotWaterType.SOLAR:
        per_square = ecs_utile * (1 - solar_coverage) / solar_appoint_efficiency
    elif ecs_type == DomesticHotWaterType.HEAT_PUMP:
        per_square = ecs_utile / heat_pump_cop
    else:  # Électrique
        per_square = ecs_utile

    return LoadResult(per_square=per_square, absolute_kwh=0.0)
