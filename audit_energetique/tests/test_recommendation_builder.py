"""
Tests des recommandations et du potentiel d'économies.
"""

from audit_energetique.enums import (
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
from audit_energetique.services.recommendation_builder import (
    RecommendationInput,
    build_recommendations,
    estimate_savings_potential,
    POSITIVE_MESSAGE,
)


def efficient_site(**overrides):
    params = dict(
        lighting_type=LightingType.LED,
        insulation=InsulationQuality.HIGH,
        glazing_type=GlazingType.DOUBLE,
        cooling_system=CoolingSystem.NONE,
        heating_system=HeatingSystem.NONE,
        domestic_hot_water=DomesticHotWaterType.SOLAR,
        equipment_categories=frozenset(),
        existing_measures=frozenset({ExistingMeasure.SOLAR_PV}),
        tariff_type=TariffType.MT,
    )
    params.update(overrides)
    return RecommendationInput(**params)


def inefficient_site():
    return RecommendationInput(
        lighting_type=LightingType.INCANDESCENT,
        insulation=InsulationQuality.LOW,
        glazing_type=GlazingType.SINGLE,
        cooling_system=CoolingSystem.SPLIT,
        heating_system=HeatingSystem.GAS_BOILER,
        domestic_hot_water=DomesticHotWaterType.ELECTRIC,
        equipment_categories=frozenset({EquipmentCategory.PRODUCTION_MACHINERY}),
        existing_measures=frozenset(),
        tariff_type=TariffType.BT,
    )


class TestBuildRecommendations:

    def test_site_efficace_message_positif_seul(self):
        assert build_recommendations(efficient_site()) == [POSITIVE_MESSAGE]

    def test_site_inefficace_toutes_les_regles(self):
        recommendations = build_recommendations(inefficient_site())
        assert len(recommendations) == 7
        assert POSITIVE_MESSAGE not in recommendations

    def test_ordre_des_regles(self):
        recommendations = build_recommendations(inefficient_site())
        keywords = ['LED', 'isolation', 'climatisation', 'chaudière', 'solaire', 'ECS', 'production']
        for message, keyword in zip(recommendations, keywords):
            assert keyword in message

    def test_climatisation_haute_efficacite_neutralise(self):
        site = efficient_site(
            cooling_system=CoolingSystem.CENTRAL,
            existing_measures=frozenset({ExistingMeasure.SOLAR_PV, ExistingMeasure.HIGH_EFFICIENCY_HVAC}),
        )
        assert build_recommendations(site) == [POSITIVE_MESSAGE]

    def test_machines_avec_monitoring(self):
        site = efficient_site(
            equipment_categories=frozenset({EquipmentCategory.PRODUCTION_MACHINERY}),
            existing_measures=frozenset({ExistingMeasure.SOLAR_PV, ExistingMeasure.MONITORING}),
        )
        assert build_recommendations(site) == [POSITIVE_MESSAGE]

    def test_simple_vitrage_malgre_bonne_isolation(self):
        recommendations = build_recommendations(efficient_site(glazing_type=GlazingType.SINGLE))
        assert len(recommendations) == 1
        assert 'isolation' in recommendations[0]


class TestSavingsPotential:

    def test_site_efficace(self):
        potential = estimate_savings_potential(efficient_site())
        assert 5 <= potential <= 40
        assert potential == 8

    def test_site_inefficace_plafonne_a_40(self):
        assert estimate_savings_potential(inefficient_site()) == 40

    def test_eclairage_fluorescent(self):
        site = efficient_site(lighting_type=LightingType.FLUORESCENT)
        assert estimate_savings_potential(site) == 14

    def test_basse_tension(self):
        assert estimate_savings_potential(efficient_site(tariff_type=TariffType.BT)) == 23

    def test_idempotent(self):
        site = inefficient_site()
        assert build_recommendations(site) == build_recommendations(site)
        assert estimate_savings_potential(site) == estimate_savings_potential(site)
