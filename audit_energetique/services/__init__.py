"""
Services de calcul pour l'app audit_energetique.
"""

from .usage_calculator import compute_usage_factor
from .envelope_calculator import compute_envelope_factor, compute_compactness_factor
from .equipment_calculator import compute_equipment_loads, compute_pharmacy_cold_load
from .ecs_calculator import compute_domestic_hot_water_load
from .hvac_calculator import compute_hvac_loads
from .tariff_calculator import (
    compute_annual_consumption_from_bill,
    compute_energy_intensity,
    compute_progressive_tariff,
)
from .energy_split_calculator import compute_energy_split
from .energy_class_calculator import compute_energy_class
from .emissions_calculator import compute_co2_emissions, compute_carbon_class
from .recommendation_builder import (
    RecommendationInput,
    build_recommendations,
    estimate_savings_potential,
)
from .audit_calculator import AuditEnergetiqueCalculator, calculate_audit_from_payload

__all__ = [
    'compute_usage_factor',
    'compute_envelope_factor',
    'compute_compactness_factor',
    'compute_equipment_loads',
    'compute_pharmacy_cold_load',
    'compute_domestic_hot_water_load',
    'compute_hvac_loads',
    'compute_annual_consumption_from_bill',
    'compute_energy_intensity',
    'compute_progressive_tariff',
    'compute_energy_split',
    'compute_energy_class',
    'compute_co2_emissions',
    'compute_carbon_class',
    'RecommendationInput',
    'build_recommendations',
    'estimate_savings_potential',
    'AuditEnergetiqueCalculator',
    'calculate_audit_from_payload',
]
