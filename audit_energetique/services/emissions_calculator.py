# audit_energetique/services/emissions_calculator.py
"""
Émissions de CO₂ et classement carbone.

Facteurs d'émission (kg CO₂/kWh) :
- Électricité réseau STEG : 0.512
- Gaz naturel : 0.202
"""

from ..constants import (
    EMISSION_FACTOR_ELECTRICITY,
    EMISSION_FACTOR_NATURAL_GAS,
    CARBON_CLASS_THRESHOLDS,
)
from ..contracts import EmissionsResult, CarbonClassResult
from ..enums import BuildingType, CarbonGrade


def compute_co2_emissions(
    electricity_consumption: float,
    gas_consumption: float,
    emission_factor_elec: float = EMISSION_FACTOR_ELECTRICITY,
    emission_factor_gas: float = EMISSION_FACTOR_NATURAL_GAS
) -> EmissionsResult:
    """
    CO₂_total = E_elec × 0.512 + E_gaz × 0.202

    Args:
        electricity_consumption: Électricité (kWh/an)
        gas_consumption: Gaz (kWh/an)

    Returns:
        EmissionsResult en kg CO₂/an (et tonnes)
    """
    co2_from_electricity = electricity_consumption * emission_factor_elec
    co2_from_gas = gas_consumption * emission_factor_gas
    total_co2 = co2_from_electricity + co2_from_gas

    return EmissionsResult(
        co2_from_electricity=round(co2_from_electricity, 2),
        co2_from_gas=round(co2_from_gas, 2),
        total_co2=round(total_co2, 2),
        total_co2_tons=round(total_co2 / 1000, 3),
    )


def compute_carbon_class(
    building_type: BuildingType,
    total_co2_kg: float,
    conditioned_surface: float
) -> CarbonClassResult:
    """
    Classe l'intensité carbone (kg CO₂/m².an) du bâtiment de A à E.

    Les seuils dépendent du type de bâtiment ; les types industriels
    ne sont pas classés.
    """
    thresholds = CARBON_CLASS_THRESHOLDS.get(building_type)

    if thresholds is None:
        return CarbonClassResult(
            is_applicable=False,
            carbon_class=CarbonGrade.NOT_APPLICABLE,
            class_description="Type de bâtiment non supporté pour le classement carbone",
        )

    if conditioned_surface <= 0:
        return CarbonClassResult(
            is_applicable=False,
            carbon_class=CarbonGrade.NOT_APPLICABLE,
            class_description="Surface conditionnée invalide",
        )

    intensity = total_co2_kg / conditioned_surface

    for max_intensity, grade, description in thresholds:
        if intensity <= max_intensity:
            break

    return CarbonClassResult(
        is_applicable=True,
        carbon_class=grade,
        intensity=round(intensity, 2),
        class_description=description,
    )
