"""
Tests des validators du questionnaire d'audit.
"""

import warnings

import pytest
from django.core.exceptions import ValidationError

from core.validators import (
    validate_audit_payload,
    validate_choice,
    validate_number,
)
from audit_energetique.enums import (
    BuildingType,
    ClimateZone,
    CoolingSystem,
    EquipmentCategory,
    TariffType,
)
from audit_energetique.services.audit_calculator import calculate_audit_from_payload


def payload(**overrides):
    data = {
        'building_type': "Bureau / Administration / Banque",
        'surface_area': 250,
        'floors': 2,
        'insulation': "Isolation moyenne",
        'glazing_type': "Double vitrage",
        'ventilation': "VMC simple flux",
        'opening_hours_per_day': 9,
        'opening_days_per_week': 5,
        'climate_zone': "Centre",
        'heating_system': "Chauffage par climatisation réversible",
        'cooling_system': "Climatisation split",
        'conditioned_coverage': "Presque tout le bâtiment",
        'domestic_hot_water': "Chauffe-eau électrique",
        'lighting_type': "Tubes fluorescents",
        'equipment_categories': ["Bureautique", "Bureautique"],
        'existing_measures': [],
        'tariff_type': "Basse tension",
        'monthly_bill_amount': 950,
    }
    data.update(overrides)
    return data


class TestChoices:

    def test_libelle(self):
        assert validate_choice('building_type', "Pharmacie", BuildingType) == BuildingType.PHARMACY

    def test_nom_de_membre(self):
        assert validate_choice('cooling_system', "SPLIT", CoolingSystem) == CoolingSystem.SPLIT

    def test_membre_direct(self):
        assert validate_choice('tariff_type', TariffType.HT, TariffType) == TariffType.HT

    def test_valeur_inconnue(self):
        with pytest.raises(ValidationError, match="building_type"):
            validate_choice('building_type', "Château", BuildingType)


class TestNumbers:

    def test_conversion(self):
        assert validate_number('surface_area', "120.5", minimum=0) == 120.5

    def test_non_numerique(self):
        with pytest.raises(ValidationError):
            validate_number('surface_area', "grand")

    def test_booleen_refuse(self):
        with pytest.raises(ValidationError):
            validate_number('floors', True)

    def test_hors_bornes(self):
        with pytest.raises(ValidationError):
            validate_number('opening_hours_per_day', 25, minimum=0, maximum=24)

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", float("nan")])
    def test_valeurs_non_finies(self, value):
        with pytest.raises(ValidationError, match="fini"):
            validate_number('surface_area', value, minimum=0, strict_minimum=True)


class TestAuditPayload:

    def test_payload_valide(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            cleaned = validate_audit_payload(payload())

        assert cleaned['building_type'] == BuildingType.OFFICE_ADMIN_BANK
        assert cleaned['climate_zone'] == ClimateZone.CENTER
        assert cleaned['floors'] == 2
        assert cleaned['equipment_categories'] == frozenset({EquipmentCategory.OFFICE})
        assert cleaned['monthly_bill_amount'] == 950

    def test_zone_par_defaut(self):
        data = payload()
        del data['climate_zone']
        assert validate_audit_payload(data)['climate_zone'] == ClimateZone.NORTH

    def test_champ_manquant(self):
        data = payload()
        del data['surface_area']
        with pytest.raises(ValidationError, match="surface_area"):
            validate_audit_payload(data)

    @pytest.mark.parametrize("surface", [0, -20])
    def test_surface_invalide(self, surface):
        with pytest.raises(ValidationError):
            validate_audit_payload(payload(surface_area=surface))

    def test_surface_nan(self):
        with pytest.raises(ValidationError):
            calculate_audit_from_payload(payload(surface_area="nan"))

    def test_etages_non_entiers(self):
        with pytest.raises(ValidationError):
            validate_audit_payload(payload(floors=2.5))

    def test_categories_pas_une_liste(self):
        with pytest.raises(ValidationError):
            validate_audit_payload(payload(equipment_categories="Bureautique"))

    def test_facture_negative(self):
        with pytest.raises(ValidationError):
            validate_audit_payload(payload(monthly_bill_amount=-10))

    def test_pas_un_dictionnaire(self):
        with pytest.raises(ValidationError):
            validate_audit_payload(["Pharmacie"])


class TestAuditPayloadWarnings:

    def test_fonctionnement_continu(self):
        with pytest.warns(UserWarning, match="24h/24"):
            validate_audit_payload(payload(opening_hours_per_day=24, opening_days_per_week=7))

    def test_batiment_ferme(self):
        with pytest.warns(UserWarning, match="fermé"):
            validate_audit_payload(payload(opening_hours_per_day=0))

    def test_couverture_sans_hvac(self):
        with pytest.warns(UserWarning, match="Couverture"):
            validate_audit_payload(payload(
                heating_system="Aucun chauffage",
                cooling_system="Aucune climatisation",
            ))

    def test_facture_sans_tarif(self):
        with pytest.warns(UserWarning, match="Basse tension"):
            validate_audit_payload(payload(tariff_type=None))


class TestCalculateFromPayload:

    def test_calcul_complet(self):
        result = calculate_audit_from_payload(payload())

        assert result.annual_consumption > 0
        assert result.energy_class.is_applicable is True
        assert result.tariff_type == TariffType.BT
        # 950 / 0.38 × 12
        assert result.bill_annual_consumption == pytest.approx(30000)
        assert 5 <= result.savings_potential_pct <= 40

    def test_payload_invalide(self):
        with pytest.raises(ValidationError):
            calculate_audit_from_payload(payload(building_type="Château"))
