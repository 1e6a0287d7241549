# audit_energetique/services/recommendation_builder.py
"""
Recommandations personnalisées et potentiel d'économies.

Chaque règle détecte un point faible du site et produit au plus une
recommandation. Le potentiel d'économies note ces mêmes points faibles
dans l'intervalle [5 %, 40 %].
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional

import numpy as np

from ..enums import (
    LightingType,
    InsulationQuality,
    GlazingType,
    CoolingSystem,
    HeatingSystem,
    DomesticHotWaterType,
    EquipmentCategory,
    ExistingMeasure,
    TariffType,
)

MIN_SAVINGS_PCT = 5
MAX_SAVINGS_PCT = 40

POSITIVE_MESSAGE = (
    "Maintenez vos bonnes pratiques et prévoyez un suivi annuel "
    "de votre performance énergétique."
)


@dataclass
class RecommendationInput:
    """Sous-ensemble du questionnaire utilisé par les règles."""
    lighting_type: LightingType
    insulation: InsulationQuality
    glazing_type: GlazingType
    cooling_system: CoolingSystem
    heating_system: HeatingSystem
    domestic_hot_water: DomesticHotWaterType
    equipment_categories: FrozenSet[EquipmentCategory] = frozenset()
    existing_measures: FrozenSet[ExistingMeasure] = frozenset()
    tariff_type: Optional[TariffType] = None

    @property
    def has_unmitigated_cooling(self) -> bool:
        return (
            self.cooling_system != CoolingSystem.NONE
            and ExistingMeasure.HIGH_EFFICIENCY_HVAC not in self.existing_measures
        )


def build_recommendations(data: RecommendationInput) -> List[str]:
    """
    Construit la liste ordonnée des recommandations.

    Returns:
        Liste de messages ; le message de bonnes pratiques seul si aucune
        règle ne se déclenche
    """
    recommendations = []

    if data.lighting_type != LightingType.LED:
        recommendations.append(
            "Remplacez votre éclairage par des LED pour réduire votre consommation jusqu'à 20 %."
        )

    if data.insulation != InsulationQuality.HIGH or data.glazing_type == GlazingType.SINGLE:
        recommendations.append(
            "Améliorez l'isolation et le vitrage (double vitrage, traitement toiture/façade) "
            "pour limiter les pertes."
        )

    if data.has_unmitigated_cooling:
        recommendations.append(
            "Installez un pilotage intelligent ou programmez une maintenance des systèmes "
            "de climatisation pour limiter les dérives."
        )

    if data.heating_system == HeatingSystem.GAS_BOILER:
        recommendations.append(
            "Étudiez la mise en place d'une chaudière à haut rendement ou d'une pompe à chaleur."
        )

    if ExistingMeasure.SOLAR_PV not in data.existing_measures:
        recommendations.append(
            "Simulez un projet solaire pour compenser une partie de votre facture STEG."
        )

    if data.domestic_hot_water == DomesticHotWaterType.ELECTRIC:
        recommendations.append(
            "Envisagez un chauffe-eau solaire ou une pompe à chaleur pour l'ECS "
            "afin de réduire les coûts."
        )

    if (
        EquipmentCategory.PRODUCTION_MACHINERY in data.equipment_categories
        and ExistingMeasure.MONITORING not in data.existing_measures
    ):
        recommendations.append(
            "Optimisez les horaires de production et installez des variateurs de vitesse "
            "sur les moteurs critiques."
        )

    if not recommendations:
        recommendations.append(POSITIVE_MESSAGE)

    return recommendations


def estimate_savings_potential(data: RecommendationInput) -> float:
    """
    Estime le potentiel d'économies (%), borné à [5, 40].

    Base 8 %, majorée pour chaque point faible non traité.
    """
    potential = 8

    if data.tariff_type == TariffType.BT:
        potential += 15

    if data.lighting_type == LightingType.FLUORESCENT:
        potential += 6
    elif data.lighting_type == LightingType.INCANDESCENT:
        potential += 10

    if data.insulation == InsulationQuality.MEDIUM:
        potential += 5
    elif data.insulation == InsulationQuality.LOW:
        potential += 10

    if data.has_unmitigated_cooling:
        potential += 6

    if data.heating_system != HeatingSystem.NONE:
        potential += 4

    if ExistingMeasure.SOLAR_PV not in data.existing_measures:
        potential += 3

    return float(np.clip(round(potential, 1), MIN_SAVINGS_PCT, MAX_SAVINGS_PCT))
