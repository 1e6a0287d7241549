# audit_energetique/services/audit_calculator.py
"""
Calculateur complet de l'audit énergétique d'un bâtiment tertiaire
ou industriel (Tunisie).

Enchaîne :
- Facteurs (enveloppe, compacité, process, climat, usage)
- Charges par m² (éclairage, informatique, base, équipements, HVAC, ECS)
- Consommation annuelle et mensuelle, coût
- Répartition électricité / gaz, émissions de CO₂
- Classement énergétique (bureaux) et classement carbone
- Recommandations et potentiel d'économies
- Analyse de la facture STEG si fournie
"""

import logging
from typing import Dict, Any, Optional

from django.conf import settings

from core.validators import validate_audit_payload

from ..constants import (
    BUILDING_COEFFICIENTS,
    PROCESS_FACTORS,
    ECS_USAGE_FACTORS,
    CLIMATE_FACTORS,
    COVERAGE_FACTORS,
    MONTHS_PER_YEAR,
)
from ..contracts import BuildingProfile, SystemSelection, CalculationResult, LoadResult
from ..enums import BuildingType, TariffType
from .usage_calculator import compute_usage_factor
from .envelope_calculator import compute_envelope_factor, compute_compactness_factor
from .equipment_calculator import compute_equipment_loads, compute_pharmacy_cold_load
from .hvac_calculator import compute_hvac_loads
from .ecs_calculator import compute_domestic_hot_water_load
from .energy_split_calculator import compute_energy_split
from .emissions_calculator import compute_co2_emissions, compute_carbon_class
from .energy_class_calculator import compute_energy_class
from .recommendation_builder import (
    RecommendationInput,
    build_recommendations,
    estimate_savings_potential,
)
from .tariff_calculator import (
    compute_annual_consumption_from_bill,
    compute_energy_intensity,
    compute_progressive_tariff,
)

logger = logging.getLogger(__name__)


def get_audit_settings() -> Dict[str, float]:
    """Coefficients réglables, définis dans settings.AUDIT_ENERGETIQUE."""
    return dict(settings.AUDIT_ENERGETIQUE)


class AuditEnergetiqueCalculator:
    """
    Calculateur d'audit énergétique pour un bâtiment.

    L'objet ne conserve que ses entrées : ``calculate_total`` peut être
    appelé plusieurs fois et renvoie toujours le même résultat.
    """

    def __init__(
        self,
        profile: BuildingProfile,
        systems: SystemSelection,
        tariff_type: Optional[TariffType] = None,
        monthly_bill_amount: Optional[float] = None
    ):
        """
        Initialise le calculateur.

        Args:
            profile: Caractéristiques du bâtiment
            systems: Systèmes énergétiques déclarés
            tariff_type: Niveau de tension STEG (optionnel)
            monthly_bill_amount: Facture mensuelle moyenne en TND (optionnelle)
        """
        self.profile = profile
        self.systems = systems
        self.tariff_type = tariff_type
        self.monthly_bill_amount = monthly_bill_amount
        self.config = get_audit_settings()

        logger.info(
            f"📊 Init audit: {profile.building_type.value}, {profile.surface_area}m², "
            f"{profile.floors} étage(s), zone {profile.climate_zone.value}"
        )

    def calculate_total(self) -> CalculationResult:
        """
        Calcul complet de l'audit.

        Returns:
            CalculationResult (valeurs brutes, arrondies par ``to_dict``)
        """
        logger.info("🔢 Calcul de l'audit énergétique")

        profile = self.profile
        systems = self.systems
        surface = profile.surface_area
        coefficients = BUILDING_COEFFICIENTS[profile.building_type]

        # Facteurs
        envelope_factor = compute_envelope_factor(
            profile.insulation, profile.glazing_type, profile.ventilation
        )
        compactness_factor = compute_compactness_factor(profile.floors)
        process_factor = PROCESS_FACTORS.get(profile.building_type, 1.0)
        climate = CLIMATE_FACTORS[profile.climate_zone]
        usage_factor = compute_usage_factor(
            profile.opening_hours_per_day, profile.opening_days_per_week
        )
        logger.debug(
            f"  Enveloppe ×{envelope_factor:.3f}, compacité ×{compactness_factor}, "
            f"process ×{process_factor}, usage {usage_factor:.4f}"
        )

        # Charges par m²
        lighting_load = coefficients.light * usage_factor
        it_load = coefficients.it * usage_factor * process_factor
        base_load = coefficients.base

        equipment = compute_equipment_loads(
            profile.building_type,
            systems.equipment_categories,
            usage_factor,
            process_factor,
            surface,
        )
        if profile.building_type == BuildingType.PHARMACY:
            cold_kwh = compute_pharmacy_cold_load(surface)
            equipment = LoadResult(
                per_square=equipment.per_square,
                absolute_kwh=equipment.absolute_kwh + cold_kwh,
            )
            logger.debug(f"  Froid pharmacie: {cold_kwh} kWh/an")

        hvac_base = coefficients.hvac * envelope_factor * compactness_factor
        hvac = compute_hvac_loads(
            hvac_base,
            climate,
            usage_factor,
            systems.heating_system,
            systems.cooling_system,
            systems.conditioned_coverage,
            heating_k=self.config['K_CH'],
            cooling_k=self.config['K_FR'],
            gas_boiler_efficiency=self.config['GAS_BOILER_EFF'],
        )

        ecs = compute_domestic_hot_water_load(
            systems.domestic_hot_water,
            coefficients.ecs,
            ECS_USAGE_FACTORS.get(profile.building_type, 1.0),
            gas_efficiency=self.config['ECS_GAS_EFF'],
            solar_coverage=self.config['ECS_SOLAR_COVERAGE'],
            solar_appoint_efficiency=self.config['ECS_SOLAR_APPOINT_EFF'],
            heat_pump_cop=self.config['ECS_PAC_COP'],
        )

        per_square_total = (
            hvac.per_square
            + lighting_load
            + it_load
            + base_load
            + equipment.per_square
            + ecs.per_square
        )

        # Consommations annuelles
        annual_consumption = (
            surface * per_square_total
            + equipment.absolute_kwh
            + ecs.absolute_kwh
        )
        monthly_consumption = annual_consumption / MONTHS_PER_YEAR

        heating_kwh = hvac.heating_load * surface
        cooling_kwh = hvac.cooling_load * surface
        ecs_kwh = ecs.per_square * surface + ecs.absolute_kwh

        coverage_factor = COVERAGE_FACTORS.get(systems.conditioned_coverage, 1.0)
        conditioned_surface = surface * coverage_factor

        # Seule la part climatisée du chauffage entre dans la consommation
        energy_split = compute_energy_split(
            annual_consumption,
            systems.heating_system,
            systems.domestic_hot_water,
            heating_kwh * coverage_factor,
            ecs_kwh,
        )
        emissions = compute_co2_emissions(
            energy_split.electricity_consumption,
            energy_split.gas_consumption,
        )

        energy_class = compute_energy_class(
            profile.building_type, heating_kwh, cooling_kwh, conditioned_surface
        )
        carbon_class = compute_carbon_class(
            profile.building_type, emissions.total_co2, conditioned_surface
        )

        energy_cost = annual_consumption * self.config['ENERGY_COST_PER_KWH']

        advice_input = RecommendationInput(
            lighting_type=systems.lighting_type,
            insulation=profile.insulation,
            glazing_type=profile.glazing_type,
            cooling_system=systems.cooling_system,
            heating_system=systems.heating_system,
            domestic_hot_water=systems.domestic_hot_water,
            equipment_categories=frozenset(systems.equipment_categories),
            existing_measures=frozenset(systems.existing_measures),
            tariff_type=self.tariff_type,
        )
        recommendations = build_recommendations(advice_input)
        savings_potential = estimate_savings_potential(advice_input)

        energy_intensity = compute_energy_intensity(annual_consumption, surface)

        # Analyse de la facture
        bill_annual = None
        bill_intensity = None
        progressive_tariff = None
        if self.monthly_bill_amount is not None:
            bill_annual = compute_annual_consumption_from_bill(
                self.monthly_bill_amount, self.tariff_type
            )
            bill_intensity = compute_energy_intensity(bill_annual, surface)
            if self.tariff_type in (None, TariffType.BT):
                progressive_tariff = compute_progressive_tariff(bill_annual / MONTHS_PER_YEAR)
            logger.info(
                f"🧾 Facture {self.monthly_bill_amount} TND/mois → {bill_annual:.0f} kWh/an"
            )

        logger.info(
            f"📊 TOTAL: {annual_consumption:.0f} kWh/an, "
            f"{emissions.total_co2_tons:.2f} t CO₂, économies potentielles {savings_potential}%"
        )

        return CalculationResult(
            usage_factor=usage_factor,
            envelope_factor=envelope_factor,
            compactness_factor=compactness_factor,
            heating=LoadResult(per_square=hvac.heating_load, absolute_kwh=heating_kwh),
            cooling=LoadResult(per_square=hvac.cooling_load, absolute_kwh=cooling_kwh),
            ecs=LoadResult(per_square=ecs.per_square, absolute_kwh=ecs_kwh),
            equipment=equipment,
            per_square_total=per_square_total,
            annual_consumption=annual_consumption,
            monthly_consumption=monthly_consumption,
            energy_cost_per_year=energy_cost,
            energy_intensity=energy_intensity,
            energy_split=energy_split,
            emissions=emissions,
            energy_class=energy_class,
            carbon_class=carbon_class,
            recommendations=recommendations,
            savings_potential_pct=savings_potential,
            tariff_type=self.tariff_type,
            bill_annual_consumption=bill_annual,
            bill_energy_intensity=bill_intensity,
            progressive_tariff=progressive_tariff,
        )


def calculate_audit_from_payload(payload: Dict[str, Any]) -> CalculationResult:
    """
    Fonction helper : valide un payload de questionnaire puis lance le calcul.

    Args:
        payload: Données brutes du formulaire

    Returns:
        Résultat du calcul

    Raises:
        ValidationError: Si le payload est invalide
    """
    cleaned = validate_audit_payload(payload)

    profile = BuildingProfile(
        building_type=cleaned['building_type'],
        surface_area=cleaned['surface_area'],
        floors=cleaned['floors'],
        insulation=cleaned['insulation'],
        glazing_type=cleaned['glazing_type'],
        ventilation=cleaned['ventilation'],
        opening_hours_per_day=cleaned['opening_hours_per_day'],
        opening_days_per_week=cleaned['opening_days_per_week'],
        climate_zone=cleaned['climate_zone'],
    )
    systems = SystemSelection(
        heating_system=cleaned['heating_system'],
        cooling_system=cleaned['cooling_system'],
        conditioned_coverage=cleaned['conditioned_coverage'],
        domestic_hot_water=cleaned['domestic_hot_water'],
        lighting_type=cleaned['lighting_type'],
        equipment_categories=cleaned['equipment_categories'],
        existing_measures=cleaned['existing_measures'],
    )

    calculator = AuditEnergetiqueCalculator(
        profile,
        systems,
        tariff_type=cleaned['tariff_type'],
        monthly_bill_amount=cleaned['monthly_bill_amount'],
    )
    return calculator.calculate_total()
