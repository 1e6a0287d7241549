# audit_energetique/services/energy_split_calculator.py
"""
Répartition de la consommation entre électricité et gaz.
"""

from ..contracts import EnergySplitResult
from ..enums import HeatingSystem, DomesticHotWaterType


def compute_energy_split(
    total_consumption: float,
    heating_system: HeatingSystem,
    ecs_type: DomesticHotWaterType,
    heating_load_kwh: float,
    ecs_load_kwh: float
) -> EnergySplitResult:
    """
    Sépare la consommation totale en électricité et gaz.

    Le gaz provient de la chaudière gaz (chauffage) et de l'ECS gaz ;
    tout le reste est de l'électricité. Le gaz est plafonné au total et
    l'électricité n'est jamais négative.

    Args:
        total_consumption: Consommation annuelle totale (kWh)
        heating_system: Système de chauffage
        ecs_type: Système ECS
        heating_load_kwh: Besoin annuel de chauffage (kWh)
        ecs_load_kwh: Besoin annuel ECS (kWh)
    """
    gas_consumption = 0.0

    if heating_system == HeatingSystem.GAS_BOILER:
        gas_consumption += heating_load_kwh

    if ecs_type == DomesticHotWaterType.GAS:
        gas_consumption += ecs_load_kwh

    gas_consumption = min(gas_consumption, max(0.0, total_consumption))
    electricity_consumption = max(0.0, total_consumption - gas_consumption)

    return EnergySplitResult(
        electricity_consumption=round(electricity_consumption, 2),
        gas_consumption=round(gas_consumption, 2),
    )
