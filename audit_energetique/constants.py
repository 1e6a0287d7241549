"""
Tables de référence de l'audit énergétique (Tunisie).

Toutes les tables sont en lecture seule (MappingProxyType) et indexées
par les énumérations de ``audit_energetique.enums``.
"""

import math
from types import MappingProxyType

from .contracts import ClimateWeights, BuildingCoefficients, EquipmentLoad
from .enums import (
    BuildingType,
    ClimateZone,
    InsulationQuality,
    GlazingType,
    VentilationSystem,
    FloorBand,
    ConditionedCoverage,
    EquipmentCategory,
    TariffType,
    EnergyClass,
    CarbonGrade,
)


HOURS_PER_YEAR = 8760
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


# ==============================================================================
# ENVELOPPE
# ==============================================================================

INSULATION_FACTORS = MappingProxyType({
    InsulationQuality.LOW: 1.2,
    InsulationQuality.MEDIUM: 1.0,
    InsulationQuality.HIGH: 0.9,
})

GLAZING_FACTORS = MappingProxyType({
    GlazingType.SINGLE: 1.1,
    GlazingType.DOUBLE: 1.0,
})

# VMC
VENTILATION_FACTORS = MappingProxyType({
    VentilationSystem.NONE: 1.0,
    VentilationSystem.SINGLE_FLOW: 1.05,
    VentilationSystem.DOUBLE_FLOW: 0.95,
})

COMPACTNESS_FACTORS = MappingProxyType({
    FloorBand.SINGLE: 1.0,
    FloorBand.TWO_OR_THREE: 0.95,
    FloorBand.FOUR_OR_MORE: 0.9,
})

FOUR_OR_MORE_FLOORS_THRESHOLD = 4
TWO_OR_THREE_FLOORS_THRESHOLD = 2

# Part de la surface desservie par la climatisation
COVERAGE_FACTORS = MappingProxyType({
    ConditionedCoverage.FEW_ROOMS: 0.3,
    ConditionedCoverage.HALF_BUILDING: 0.6,
    ConditionedCoverage.MOST_BUILDING: 1.0,
})


# ==============================================================================
# CLIMAT
# ==============================================================================

CLIMATE_FACTORS = MappingProxyType({
    ClimateZone.NORTH: ClimateWeights(
        heating_factor=0.95,
        cooling_factor=1.05,
        winter_weight=0.3,
        summer_weight=0.5,
        mid_season_weight=0.2,
    ),
    ClimateZone.CENTER: ClimateWeights(
        heating_factor=1.1,
        cooling_factor=0.95,
        winter_weight=0.4,
        summer_weight=0.4,
        mid_season_weight=0.2,
    ),
    ClimateZone.SOUTH: ClimateWeights(
        heating_factor=0.9,
        cooling_factor=1.1,
        winter_weight=0.2,
        summer_weight=0.55,
        mid_season_weight=0.25,
    ),
})


# ==============================================================================
# COEFFICIENTS PAR TYPE DE BÂTIMENT (kWh/m²/an)
# ==============================================================================

BUILDING_COEFFICIENTS = MappingProxyType({
    BuildingType.PHARMACY: BuildingCoefficients(hvac=80, light=20, it=25, base=8, ecs=3),
    BuildingType.SERVICE: BuildingCoefficients(hvac=80, light=24, it=35, base=8, ecs=3),
    BuildingType.CAFE_RESTAURANT: BuildingCoefficients(hvac=90, light=22, it=30, base=10, ecs=18),
    BuildingType.BEAUTY_CENTER: BuildingCoefficients(hvac=80, light=18, it=30, base=8, ecs=12),
    BuildingType.HOTEL_GUESTHOUSE: BuildingCoefficients(hvac=110, light=18, it=28, base=10, ecs=25),
    BuildingType.CLINIC_MEDICAL: BuildingCoefficients(hvac=110, light=18, it=28, base=10, ecs=22),
    BuildingType.OFFICE_ADMIN_BANK: BuildingCoefficients(hvac=65, light=14, it=25, base=8, ecs=3),
    BuildingType.LIGHT_WORKSHOP: BuildingCoefficients(hvac=55, light=10, it=20, base=5, ecs=3),
    BuildingType.HEAVY_FACTORY: BuildingCoefficients(hvac=45, light=8, it=30, base=5, ecs=3),
    BuildingType.TEXTILE_PACKAGING: BuildingCoefficients(hvac=50, light=12, it=35, base=6, ecs=3),
    BuildingType.FOOD_INDUSTRY: BuildingCoefficients(hvac=55, light=15, it=40, base=8, ecs=8),
    BuildingType.PLASTIC_INJECTION: BuildingCoefficients(hvac=60, light=12, it=45, base=8, ecs=4),
    BuildingType.COLD_AGRO_INDUSTRY: BuildingCoefficients(hvac=70, light=10, it=40, base=10, ecs=6),
    BuildingType.SCHOOL_TRAINING: BuildingCoefficients(hvac=60, light=12, it=15, base=6, ecs=5),
})

# Intensité process (équipements et informatique)
PROCESS_FACTORS = MappingProxyType({
    BuildingType.PHARMACY: 1.0,
    BuildingType.SERVICE: 1.0,
    BuildingType.CAFE_RESTAURANT: 1.3,
    BuildingType.BEAUTY_CENTER: 1.3,
    BuildingType.HOTEL_GUESTHOUSE: 1.0,
    BuildingType.CLINIC_MEDICAL: 1.0,
    BuildingType.OFFICE_ADMIN_BANK: 1.0,
    BuildingType.LIGHT_WORKSHOP: 1.3,
    BuildingType.HEAVY_FACTORY: 1.6,
    BuildingType.TEXTILE_PACKAGING: 1.6,
    BuildingType.FOOD_INDUSTRY: 1.6,
    BuildingType.PLASTIC_INJECTION: 1.6,
    BuildingType.COLD_AGRO_INDUSTRY: 1.6,
    BuildingType.SCHOOL_TRAINING: 1.0,
})

ECS_USAGE_FACTORS = MappingProxyType({
    BuildingType.PHARMACY: 0.7,
    BuildingType.SERVICE: 0.7,
    BuildingType.CAFE_RESTAURANT: 1.0,
    BuildingType.BEAUTY_CENTER: 1.4,
    BuildingType.HOTEL_GUESTHOUSE: 1.4,
    BuildingType.CLINIC_MEDICAL: 1.0,
    BuildingType.OFFICE_ADMIN_BANK: 0.7,
    BuildingType.LIGHT_WORKSHOP: 0.7,
    BuildingType.HEAVY_FACTORY: 0.7,
    BuildingType.TEXTILE_PACKAGING: 0.7,
    BuildingType.FOOD_INDUSTRY: 1.0,
    BuildingType.PLASTIC_INJECTION: 0.7,
    BuildingType.COLD_AGRO_INDUSTRY: 1.0,
    BuildingType.SCHOOL_TRAINING: 0.7,
})


# ==============================================================================
# ÉQUIPEMENTS
# ==============================================================================

EQUIPMENT_LOADS = MappingProxyType({
    EquipmentCategory.LIGHTING: EquipmentLoad(0),
    EquipmentCategory.OFFICE: EquipmentLoad(0),
    EquipmentCategory.COMMERCIAL_COOLING: EquipmentLoad(30),
    EquipmentCategory.KITCHEN: EquipmentLoad(25),
    EquipmentCategory.SPECIFIC_EQUIPMENT: EquipmentLoad(10),
    EquipmentCategory.PRODUCTION_MACHINERY: EquipmentLoad(40),
    EquipmentCategory.COMPRESSORS: EquipmentLoad(25),
    EquipmentCategory.PUMPS_CONVEYORS: EquipmentLoad(15),
    EquipmentCategory.INDUSTRIAL_COLD: EquipmentLoad(60, is_24h=True),
    EquipmentCategory.AUXILIARY_EQUIPMENT: EquipmentLoad(8),
})

# Froid obligatoire des pharmacies : (surface max m², besoin kWh/an)
PHARMACY_COLD_THRESHOLDS = (
    (40, 4818),
    (80, 6132),
    (120, 7446),
    (math.inf, 10950),
)


# ==============================================================================
# TARIFS STEG
# ==============================================================================

# Prix moyen TND/kWh par niveau de tension
TARIFF_RATES = MappingProxyType({
    TariffType.BT: 0.38,
    TariffType.MT: 0.32,
    TariffType.HT: 0.27,
})

# Non-résidentiel BT (> 100 kWh/mois) : (min, max, DT/kWh)
NON_RESIDENTIAL_BT_BRACKETS = (
    (0, 200, 0.195),
    (200, 300, 0.240),
    (300, 500, 0.333),
    (500, math.inf, 0.391),
)


# ==============================================================================
# CLASSEMENT ÉNERGÉTIQUE BECTh (bureaux / administration / banque)
# ==============================================================================

ENERGY_CLASS_APPLICABLE_TYPES = frozenset({BuildingType.OFFICE_ADMIN_BANK})

# (BECTh max kWh/m².an, classe, description)
ENERGY_CLASS_THRESHOLDS = (
    (75, EnergyClass.CLASS_1, "Excellente performance énergétique"),
    (85, EnergyClass.CLASS_2, "Très bonne performance énergétique"),
    (100, EnergyClass.CLASS_3, "Bonne performance énergétique"),
    (115, EnergyClass.CLASS_4, "Performance énergétique correcte"),
    (140, EnergyClass.CLASS_5, "Performance énergétique moyenne"),
    (170, EnergyClass.CLASS_6, "Performance énergétique médiocre"),
    (210, EnergyClass.CLASS_7, "Bâtiment énergivore"),
    (math.inf, EnergyClass.CLASS_8, "Bâtiment très énergivore"),
)


# ==============================================================================
# ÉMISSIONS (kg CO₂/kWh)
# ==============================================================================

EMISSION_FACTOR_ELECTRICITY = 0.512  # Réseau STEG
EMISSION_FACTOR_NATURAL_GAS = 0.202

_CARBON_DESCRIPTIONS = (
    "Très faible empreinte carbone",
    "Bonne performance",
    "Niveau moyen",
    "Émissions élevées",
    "Très émissif",
)


def _carbon_scale(*bornes):
    grades = (CarbonGrade.A, CarbonGrade.B, CarbonGrade.C, CarbonGrade.D, CarbonGrade.E)
    return tuple(zip(bornes + (math.inf,), grades, _CARBON_DESCRIPTIONS))


_GENERAL_CARBON = _carbon_scale(15, 25, 40, 60)
_CAFE_CARBON = _carbon_scale(20, 30, 50, 75)

# (intensité max kg CO₂/m².an, grade, description)
CARBON_CLASS_THRESHOLDS = MappingProxyType({
    BuildingType.OFFICE_ADMIN_BANK: _GENERAL_CARBON,
    BuildingType.PHARMACY: _GENERAL_CARBON,
    BuildingType.CAFE_RESTAURANT: _CAFE_CARBON,
    BuildingType.BEAUTY_CENTER: _CAFE_CARBON,
    BuildingType.HOTEL_GUESTHOUSE: _carbon_scale(18, 30, 50, 70),
    BuildingType.CLINIC_MEDICAL: _carbon_scale(20, 35, 55, 80),
    BuildingType.SCHOOL_TRAINING: _carbon_scale(12, 20, 30, 45),
})
