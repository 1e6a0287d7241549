"""
Contrats de données pour le module audit_energetique.
Définit les structures d'entrée du questionnaire et les résultats garantis par les calculs.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, FrozenSet

from .enums import (
    BuildingType,
    ClimateZone,
    InsulationQuality,
    GlazingType,
    VentilationSystem,
    HeatingSystem,
    CoolingSystem,
    ConditionedCoverage,
    DomesticHotWaterType,
    LightingType,
    EquipmentCategory,
    ExistingMeasure,
    TariffType,
    EnergyClass,
    CarbonGrade,
)


def _round(value: Optional[float], decimals: int = 2) -> Optional[float]:
    """Arrondi appliqué une seule fois, à la sérialisation du résultat."""
    if value is None:
        return None
    return round(value, decimals)


def _enum_value(member) -> Optional[str]:
    return member.value if member is not None else None


# ==============================================================================
# ENTRÉES
# ==============================================================================

@dataclass
class BuildingProfile:
    """
    Caractéristiques du bâtiment audité.

    Attributes:
        building_type: Type de bâtiment
        surface_area: Surface totale (m²)
        floors: Nombre d'étages
        insulation: Qualité d'isolation
        glazing_type: Type de vitrage
        ventilation: Système de ventilation (VMC)
        opening_hours_per_day: Heures d'ouverture par jour
        opening_days_per_week: Jours d'ouverture par semaine
        climate_zone: Zone climatique (Nord/Centre/Sud)
    """
    building_type: BuildingType
    surface_area: float
    floors: int
    insulation: InsulationQuality
    glazing_type: GlazingType
    ventilation: VentilationSystem
    opening_hours_per_day: float
    opening_days_per_week: float
    climate_zone: ClimateZone = ClimateZone.NORTH


@dataclass
class SystemSelection:
    """Systèmes énergétiques déclarés (l'ordre des ensembles n'a pas d'importance)."""
    heating_system: HeatingSystem
    cooling_system: CoolingSystem
    conditioned_coverage: ConditionedCoverage
    domestic_hot_water: DomesticHotWaterType
    lighting_type: LightingType
    equipment_categories: FrozenSet[EquipmentCategory] = frozenset()
    existing_measures: FrozenSet[ExistingMeasure] = frozenset()


@dataclass(frozen=True)
class ClimateWeights:
    """
    Pondérations saisonnières d'une zone climatique.

    Les poids hiver / été / mi-saison ne somment pas forcément à 1.
    """
    heating_factor: float
    cooling_factor: float
    winter_weight: float
    summer_weight: float
    mid_season_weight: float


@dataclass(frozen=True)
class BuildingCoefficients:
    """Charges de référence par type de bâtiment (kWh/m²/an)."""
    hvac: float
    light: float
    it: float
    base: float
    ecs: float


@dataclass(frozen=True)
class EquipmentLoad:
    value: float  # kWh/m²/an
    is_24h: bool = False


# ==============================================================================
# RÉSULTATS INTERMÉDIAIRES
# ==============================================================================

@dataclass
class LoadResult:
    """Charge d'un poste : par m² (kWh/m²/an) et absolue (kWh/an)."""
    per_square: float = 0.0
    absolute_kwh: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'per_square': _round(self.per_square),
            'absolute_kwh': _round(self.absolute_kwh),
        }


@dataclass
class HvacResult:
    """
    Charges HVAC par m².

    Attributes:
        per_square: Charge combinée chauffage + froid après couverture (kWh/m²/an)
        heating_load: Besoin de chauffage (kWh/m²/an)
        cooling_load: Besoin de froid (kWh/m²/an)
    """
    per_square: float
    heating_load: float
    cooling_load: float


@dataclass
class EnergySplitResult:
    electricity_consumption: float  # kWh/an
    gas_consumption: float  # kWh/an

    def to_dict(self) -> Dict[str, Any]:
        return {
            'electricity_consumption': self.electricity_consumption,
            'gas_consumption': self.gas_consumption,
        }


@dataclass
class EnergyClassResult:
    """
    Classement énergétique BECTh.

    ``energy_class`` et ``becth`` valent None lorsque le classement n'est pas
    applicable ou que la surface conditionnée est invalide.
    """
    is_applicable: bool
    becth: Optional[float] = None
    energy_class: Optional[EnergyClass] = None
    class_description: Optional[str] = None
    unit: str = 'kWh/m².an'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_applicable': self.is_applicable,
            'becth': self.becth,
            'energy_class': _enum_value(self.energy_class),
            'class_description': self.class_description,
            'unit': self.unit,
        }


@dataclass
class EmissionsResult:
    co2_from_electricity: float  # kg CO₂/an
    co2_from_gas: float  # kg CO₂/an
    total_co2: float  # kg CO₂/an
    total_co2_tons: float  # t CO₂/an

    def to_dict(self) -> Dict[str, Any]:
        return {
            'co2_from_electricity': self.co2_from_electricity,
            'co2_from_gas': self.co2_from_gas,
            'total_co2': self.total_co2,
            'total_co2_tons': self.total_co2_tons,
        }


@dataclass
class CarbonClassResult:
    is_applicable: bool
    carbon_class: CarbonGrade
    intensity: Optional[float] = None  # kg CO₂/m².an
    class_description: Optional[str] = None
    unit: str = 'kg CO₂/m².an'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_applicable': self.is_applicable,
            'carbon_class': self.carbon_class.value,
            'intensity': self.intensity,
            'class_description': self.class_description,
            'unit': self.unit,
        }


@dataclass
class BracketDetail:
    min: float
    max: float
    rate: float  # DT/kWh
    consumption: float  # kWh dans la tranche
    cost: float  # DT


@dataclass
class ProgressiveTariffResult:
    monthly_cost: float  # DT/mois
    annual_cost: float  # DT/an
    effective_rate: float  # DT/kWh moyen
    bracket_details: List[BracketDetail] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'monthly_cost': self.monthly_cost,
            'annual_cost': self.annual_cost,
            'effective_rate': self.effective_rate,
            'bracket_details': [
                {
                    'min': b.min,
                    'max': b.max,
                    'rate': b.rate,
                    'consumption': b.consumption,
                    'cost': b.cost,
                }
                for b in self.bracket_details
            ],
        }


# ==============================================================================
# RÉSULTAT COMPLET
# ==============================================================================

@dataclass
class CalculationResult:
    """
    Résultat complet d'un audit énergétique.
    Éphémère : la persistance est assurée par l'appelant.
    """
    usage_factor: float
    envelope_factor: float
    compactness_factor: float
    heating: LoadResult
    cooling: LoadResult
    ecs: LoadResult
    equipment: LoadResult
    per_square_total: float
    annual_consumption: float
    monthly_consumption: float
    energy_cost_per_year: float
    energy_intensity: float
    energy_split: EnergySplitResult
    emissions: EmissionsResult
    energy_class: EnergyClassResult
    carbon_class: CarbonClassResult
    recommendations: List[str]
    savings_potential_pct: float
    tariff_type: Optional[TariffType] = None
    bill_annual_consumption: Optional[float] = None
    bill_energy_intensity: Optional[float] = None
    progressive_tariff: Optional[ProgressiveTariffResult] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convertit tout en dictionnaire (valeurs agrégées arrondies à 2 décimales)."""
        return {
            'usage_factor': _round(self.usage_factor, 4),
            'envelope_factor': _round(self.envelope_factor, 4),
            'compactness_factor': self.compactness_factor,
            'loads': {
                'heating': self.heating.to_dict(),
                'cooling': self.cooling.to_dict(),
                'ecs': self.ecs.to_dict(),
                'equipment': self.equipment.to_dict(),
            },
            'per_square_total': _round(self.per_square_total),
            'annual_consumption': _round(self.annual_consumption),
            'monthly_consumption': _round(self.monthly_consumption),
            'energy_cost_per_year': _round(self.energy_cost_per_year),
            'energy_intensity': _round(self.energy_intensity),
            'energy_split': self.energy_split.to_dict(),
            'emissions': self.emissions.to_dict(),
            'energy_class': self.energy_class.to_dict(),
            'carbon_class': self.carbon_class.to_dict(),
            'recommendations': list(self.recommendations),
            'savings_potential_pct': self.savings_potential_pct,
            'tariff_type': _enum_value(self.tariff_type),
            'bill_annual_consumption': self.bill_annual_consumption,
            'bill_energy_intensity': self.bill_energy_intensity,
            'progressive_tariff': (
                self.progressive_tariff.to_dict() if self.progressive_tariff else None
            ),
        }
