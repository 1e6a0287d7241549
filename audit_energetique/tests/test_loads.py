"""
Tests des charges équipements, froid pharmacie et ECS.
"""

import pytest

from audit_energetique.enums import BuildingType, EquipmentCategory, DomesticHotWaterType
from audit_energetique.services.equipment_calculator import (
    compute_equipment_loads,
    compute_pharmacy_cold_load,
)
from audit_energetique.services.ecs_calculator import compute_domestic_hot_water_load


ECS_PARAMS = dict(
    gas_efficiency=0.9,
    solar_coverage=0.7,
    solar_appoint_efficiency=0.9,
    heat_pump_cop=3.0,
)


class TestEquipmentLoads:
    """Tests des charges d'équipements spécifiques."""

    def test_aucune_categorie(self):
        result = compute_equipment_loads(
            BuildingType.SERVICE, [], usage_factor=0.5, process_factor=1.0, surface=100
        )
        assert result.per_square == 0
        assert result.absolute_kwh == 0

    def test_ponderation_usage_et_process(self):
        """Les charges non permanentes suivent usage × process."""
        result = compute_equipment_loads(
            BuildingType.FOOD_INDUSTRY,
            [EquipmentCategory.PRODUCTION_MACHINERY, EquipmentCategory.COMPRESSORS],
            usage_factor=0.5,
            process_factor=1.6,
            surface=1000,
        )
        # (40 + 25) × 0.5 × 1.6 = 52
        assert result.per_square == pytest.approx(52)

    def test_froid_industriel_24h(self):
        """Le froid industriel tourne 24h/24 : indépendant de l'usage."""
        result = compute_equipment_loads(
            BuildingType.COLD_AGRO_INDUSTRY,
            [EquipmentCategory.INDUSTRIAL_COLD],
            usage_factor=0.1,
            process_factor=1.6,
            surface=500,
        )
        assert result.per_square == pytest.approx(60)

    def test_doublons_comptes_une_fois(self):
        result = compute_equipment_loads(
            BuildingType.CAFE_RESTAURANT,
            [EquipmentCategory.KITCHEN, EquipmentCategory.KITCHEN],
            usage_factor=1.0,
            process_factor=1.0,
            surface=80,
        )
        assert result.per_square == pytest.approx(25)

    def test_absolute_kwh_toujours_nul(self):
        result = compute_equipment_loads(
            BuildingType.HEAVY_FACTORY,
            list(EquipmentCategory),
            usage_factor=1.0,
            process_factor=1.6,
            surface=2000,
        )
        assert result.absolute_kwh == 0


class TestPharmacyColdLoad:
    """Tests du froid obligatoire des pharmacies."""

    @pytest.mark.parametrize("surface,expected", [
        (30, 4818), (40, 4818), (41, 6132), (80, 6132), (100, 7446), (120, 7446), (500, 10950),
    ])
    def test_seuils(self, surface, expected):
        assert compute_pharmacy_cold_load(surface) == expected


class TestDomesticHotWater:
    """Tests de l'ECS selon le système de production."""

    def test_sans_ecs(self):
        result = compute_domestic_hot_water_load(
            DomesticHotWaterType.NONE, 20, 1.0, **ECS_PARAMS
        )
        assert result.per_square == 0

    def test_electrique(self):
        result = compute_domestic_hot_water_load(
            DomesticHotWaterType.ELECTRIC, 20, 0.7, **ECS_PARAMS
        )
        assert result.per_square == pytest.approx(14)

    def test_gaz_divise_par_rendement(self):
        result = compute_domestic_hot_water_load(
            DomesticHotWaterType.GAS, 18, 1.0, **ECS_PARAMS
        )
        assert result.per_square == pytest.approx(20)

    def test_solaire_seulement_appoint(self):
        result = compute_domestic_hot_water_load(
            DomesticHotWaterType.SOLAR, 18, 1.0, **ECS_PARAMS
        )
        # 18 × 0.3 / 0.9 = 6
        assert result.per_square == pytest.approx(6)

    def test_pompe_a_chaleur(self):
        result = compute_domestic_hot_water_load(
            DomesticHotWaterType.HEAT_PUMP, 18, 1.0, **ECS_PARAMS
        )
        assert result.per_square == pytest.approx(6)
        assert result.absolute_kwh == 0
