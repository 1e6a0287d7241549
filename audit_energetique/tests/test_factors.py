"""
Tests unitaires des facteurs d'usage, d'enveloppe et de compacité.
"""

import pytest

from audit_energetique.enums import InsulationQuality, GlazingType, VentilationSystem
from audit_energetique.services.usage_calculator import compute_usage_factor
from audit_energetique.services.envelope_calculator import (
    compute_envelope_factor,
    compute_compactness_factor,
)


class TestUsageFactor:
    """Tests du facteur d'usage."""

    @pytest.mark.parametrize("hours,days", [
        (0, 0), (8, 5), (12, 6), (24, 7), (30, 10), (0.5, 1),
    ])
    def test_reste_entre_0_et_1(self, hours, days):
        """Le facteur d'usage est toujours dans [0, 1]."""
        usage = compute_usage_factor(hours, days)
        assert 0 <= usage <= 1

    def test_horaires_bureau(self):
        """8h × 5j × 52 semaines = 2080 h sur 8760."""
        assert compute_usage_factor(8, 5) == pytest.approx(2080 / 8760)

    def test_entrees_negatives_donnent_zero(self):
        assert compute_usage_factor(-8, 5) == 0
        assert compute_usage_factor(8, -5) == 0.0

    def test_fonctionnement_excessif_plafonne(self):
        """Des horaires impossibles sont ramenés à 1."""
        assert compute_usage_factor(30, 10) == 1.0

    def test_entrees_non_finies(self):
        """inf × 0 ne doit pas produire NaN."""
        assert compute_usage_factor(float("inf"), 0) == 0
        assert compute_usage_factor(float("inf"), 5) == 1.0
        assert compute_usage_factor(float("nan"), 5) == 0


class TestEnvelopeFactor:
    """Tests du facteur d'enveloppe."""

    def test_bonne_enveloppe(self):
        factor = compute_envelope_factor(
            InsulationQuality.MEDIUM, GlazingType.DOUBLE, VentilationSystem.DOUBLE_FLOW
        )
        assert factor == pytest.approx(0.95)

    def test_mauvaise_enveloppe(self):
        factor = compute_envelope_factor(
            InsulationQuality.LOW, GlazingType.SINGLE, VentilationSystem.SINGLE_FLOW
        )
        assert factor == pytest.approx(1.386)

    def test_toujours_positif(self):
        for insulation in InsulationQuality:
            for glazing in GlazingType:
                for ventilation in VentilationSystem:
                    assert compute_envelope_factor(insulation, glazing, ventilation) > 0


class TestCompactnessFactor:
    """Plus d'étages = facteur plus faible."""

    @pytest.mark.parametrize("floors,expected", [
        (1, 1.0), (2, 0.95), (3, 0.95), (4, 0.9), (5, 0.9), (12, 0.9),
    ])
    def test_tranches_etages(self, floors, expected):
        assert compute_compactness_factor(floors) == expected
