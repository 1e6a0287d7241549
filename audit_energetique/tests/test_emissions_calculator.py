"""
Tests des émissions de CO₂ et du classement carbone.
"""

import pytest

from audit_energetique.enums import BuildingType, CarbonGrade
from audit_energetique.services.emissions_calculator import (
    compute_co2_emissions,
    compute_carbon_class,
)


class TestCo2Emissions:

    def test_facteurs_par_defaut(self):
        """1000 kWh × 0.512 + 1000 kWh × 0.202 = 714 kg."""
        result = compute_co2_emissions(1000, 1000)
        assert result.co2_from_electricity == pytest.approx(512)
        assert result.co2_from_gas == pytest.approx(202)
        assert result.total_co2 == pytest.approx(714)
        assert result.total_co2_tons == pytest.approx(0.714)

    def test_facteurs_personnalises(self):
        result = compute_co2_emissions(1000, 0, emission_factor_elec=0.4)
        assert result.total_co2 == pytest.approx(400)

    def test_zero(self):
        result = compute_co2_emissions(0, 0)
        assert result.total_co2 == 0
        assert result.total_co2_tons == 0


class TestCarbonClass:

    @pytest.mark.parametrize("co2_kg,expected", [
        (1000, CarbonGrade.A),   # 10 kg/m²
        (1500, CarbonGrade.A),   # borne incluse
        (2000, CarbonGrade.B),
        (3500, CarbonGrade.C),
        (5000, CarbonGrade.D),
        (7000, CarbonGrade.E),
    ])
    def test_bureaux(self, co2_kg, expected):
        result = compute_carbon_class(BuildingType.OFFICE_ADMIN_BANK, co2_kg, 100)
        assert result.is_applicable is True
        assert result.carbon_class == expected

    def test_ecole_plus_stricte(self):
        result = compute_carbon_class(BuildingType.SCHOOL_TRAINING, 1500, 100)
        assert result.carbon_class == CarbonGrade.B
        assert result.intensity == 15

    def test_industrie_non_supportee(self):
        result = compute_carbon_class(BuildingType.HEAVY_FACTORY, 5000, 100)
        assert result.is_applicable is False
        assert result.carbon_class == CarbonGrade.NOT_APPLICABLE
        assert result.class_description == "Type de bâtiment non supporté pour le classement carbone"

    def test_surface_invalide(self):
        result = compute_carbon_class(BuildingType.PHARMACY, 5000, 0)
        assert result.is_applicable is False
        assert result.intensity is None
        assert result.class_description == "Surface conditionnée invalide"
