"""
Validators avancés pour le module core

Validation du questionnaire d'audit énergétique : forme du payload,
bornes physiques et cohérence des systèmes déclarés.
"""

from django.core.exceptions import ValidationError
import math
import warnings

from audit_energetique.enums import (
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
)


REQUIRED_CHOICES = {
    'building_type': BuildingType,
    'insulation': InsulationQuality,
    'glazing_type': GlazingType,
    'ventilation': VentilationSystem,
    'heating_system': HeatingSystem,
    'cooling_system': CoolingSystem,
    'conditioned_coverage': ConditionedCoverage,
    'domestic_hot_water': DomesticHotWaterType,
    'lighting_type': LightingType,
}


# ==============================================================================
# VALIDATORS DE BASE
# ==============================================================================

def validate_choice(field, value, enum_cls):
    """
    Convertit un libellé (ou un nom de membre) en membre d'énumération.

    Args:
        field: Nom du champ (pour le message d'erreur)
        value: Valeur reçue (libellé, nom ou membre)
        enum_cls: Énumération attendue

    Raises:
        ValidationError: Si la valeur n'appartient pas à l'énumération
    """
    if isinstance(value, enum_cls):
        return value

    for member in enum_cls:
        if value == member.value or value == member.name:
            return member

    choix = ', '.join(f"'{m.value}'" for m in enum_cls)
    raise ValidationError(
        f"Valeur invalide pour {field} : {value!r}. Choix possibles : {choix}"
    )


def validate_number(field, value, minimum=None, maximum=None, strict_minimum=False):
    """
    Vérifie qu'une valeur est numérique et dans les bornes.

    Raises:
        ValidationError: Si non numérique ou hors bornes
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} doit être un nombre (reçu : {value!r})")

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} doit être un nombre (reçu : {value!r})")

    if not math.isfinite(number):
        raise ValidationError(f"{field} doit être un nombre fini (reçu : {value!r})")

    if minimum is not None:
        if strict_minimum and number <= minimum:
            raise ValidationError(f"{field} doit être strictement supérieur à {minimum} (reçu : {number})")
        if not strict_minimum and number < minimum:
            raise ValidationError(f"{field} doit être supérieur ou égal à {minimum} (reçu : {number})")

    if maximum is not None and number > maximum:
        raise ValidationError(f"{field} doit être inférieur ou égal à {maximum} (reçu : {number})")

    return number


def validate_choice_list(field, values, enum_cls):
    """Convertit une liste de libellés en ensemble figé (doublons ignorés)."""
    if values is None:
        return frozenset()

    if isinstance(values, (str, bytes)) or not hasattr(values, '__iter__'):
        raise ValidationError(f"{field} doit être une liste (reçu : {values!r})")

    return frozenset(validate_choice(field, v, enum_cls) for v in values)


# ==============================================================================
# VALIDATORS COHÉRENCE DU QUESTIONNAIRE
# ==============================================================================

def validate_opening_schedule(heures_par_jour, jours_par_semaine):
    """
    Vérifie la cohérence des horaires d'ouverture.

    Warnings:
        UserWarning: Si horaires continus ou bâtiment déclaré fermé
    """
    if heures_par_jour == 0 or jours_par_semaine == 0:
        warnings.warn(
            "Bâtiment déclaré fermé (0 heure ou 0 jour d'ouverture) : "
            "seules les charges permanentes seront comptées.",
            UserWarning
        )
    elif heures_par_jour == 24 and jours_par_semaine == 7:
        warnings.warn(
            "Fonctionnement 24h/24 et 7j/7 déclaré : facteur d'usage maximal (1.0).",
            UserWarning
        )


def validate_systems_coherence(cooling_system, conditioned_coverage, heating_system):
    """
    Vérifie la cohérence entre systèmes et couverture climatisée.

    Warnings:
        UserWarning: Si une couverture est déclarée sans aucun système HVAC
    """
    if (
        cooling_system == CoolingSystem.NONE
        and heating_system == HeatingSystem.NONE
        and conditioned_coverage != ConditionedCoverage.FEW_ROOMS
    ):
        warnings.warn(
            f"Couverture '{conditioned_coverage.value}' déclarée sans chauffage "
            f"ni climatisation : la surface conditionnée sera ignorée pour le HVAC.",
            UserWarning
        )


def validate_bill(montant_facture, tariff_type):
    """
    Vérifie le montant de facture mensuelle.

    Raises:
        ValidationError: Si montant négatif

    Warnings:
        UserWarning: Si facture fournie sans niveau de tension (BT par défaut)
    """
    if montant_facture is None:
        return None

    montant = validate_number('monthly_bill_amount', montant_facture, minimum=0)

    if tariff_type is None:
        warnings.warn(
            "Facture fournie sans niveau de tension : tarif Basse tension appliqué.",
            UserWarning
        )

    return montant


# ==============================================================================
# PAYLOAD COMPLET
# ==============================================================================

def validate_audit_payload(payload):
    """
    Valide et normalise un payload de questionnaire d'audit.

    Args:
        payload: Dictionnaire brut (libellés du formulaire ou noms de membres)

    Returns:
        Dictionnaire nettoyé (membres d'énumération, nombres)

    Raises:
        ValidationError: Si champ manquant, choix inconnu ou valeur hors bornes
    """
    if not isinstance(payload, dict):
        raise ValidationError("Le payload doit être un dictionnaire")

    required = list(REQUIRED_CHOICES) + [
        'surface_area', 'floors', 'opening_hours_per_day', 'opening_days_per_week'
    ]
    manquants = [f for f in required if payload.get(f) is None]
    if manquants:
        raise ValidationError(f"Champs obligatoires manquants : {', '.join(manquants)}")

    cleaned = {
        field: validate_choice(field, payload[field], enum_cls)
        for field, enum_cls in REQUIRED_CHOICES.items()
    }

    cleaned['climate_zone'] = validate_choice(
        'climate_zone', payload.get('climate_zone') or ClimateZone.NORTH, ClimateZone
    )

    cleaned['surface_area'] = validate_number(
        'surface_area', payload['surface_area'], minimum=0, strict_minimum=True
    )

    floors = validate_number('floors', payload['floors'], minimum=1)
    if floors != int(floors):
        raise ValidationError(f"floors doit être un entier (reçu : {floors})")
    cleaned['floors'] = int(floors)

    cleaned['opening_hours_per_day'] = validate_number(
        'opening_hours_per_day', payload['opening_hours_per_day'], minimum=0, maximum=24
    )
    cleaned['opening_days_per_week'] = validate_number(
        'opening_days_per_week', payload['opening_days_per_week'], minimum=0, maximum=7
    )

    cleaned['equipment_categories'] = validate_choice_list(
        'equipment_categories', payload.get('equipment_categories'), EquipmentCategory
    )
    cleaned['existing_measures'] = validate_choice_list(
        'existing_measures', payload.get('existing_measures'), ExistingMeasure
    )

    tariff_type = payload.get('tariff_type')
    cleaned['tariff_type'] = (
        validate_choice('tariff_type', tariff_type, TariffType) if tariff_type is not None else None
    )
    cleaned['monthly_bill_amount'] = validate_bill(
        payload.get('monthly_bill_amount'), cleaned['tariff_type']
    )

    validate_opening_schedule(cleaned['opening_hours_per_day'], cleaned['opening_days_per_week'])
    validate_systems_coherence(
        cleaned['cooling_system'], cleaned['conditioned_coverage'], cleaned['heating_system']
    )

    return cleaned
