# audit_energetique/services/hvac_calculator.py
"""
Charges de chauffage et de climatisation par m².

Formules :
- F*_ch = k_ch + (1 - k_ch) × F_usage
- F*_fr = k_fr + (1 - k_fr) × F_usage
- C_ch = Base_HVAC × F_ch × F*_ch × (w_hiver + 0.5 × w_mi)   [÷ η_chaudière si gaz]
- C_fr = Base_HVAC × F_fr × F*_fr × (w_été + 0.5 × w_mi)
- C_HVAC = (C_ch + C_fr) × F_couverture
"""

import logging

from ..constants import COVERAGE_FACTORS
from ..contracts import ClimateWeights, HvacResult
from ..enums import HeatingSystem, CoolingSystem, ConditionedCoverage

logger = logging.getLogger(__name__)


def compute_hvac_loads(
    hvac_base: float,
    climate: ClimateWeights,
    usage_factor: float,
    heating_system: HeatingSystem,
    cooling_system: CoolingSystem,
    conditioned_coverage: ConditionedCoverage,
    heating_k: float,
    cooling_k: float,
    gas_boiler_efficiency: float = 0.6
) -> HvacResult:
    """
    Calcule les charges HVAC (chauffage + froid) par m².

    Les constantes k représentent la part des besoins indépendante de
    l'occupation (inertie, maintien hors gel, serveurs...).

    Args:
        hvac_base: Base HVAC corrigée enveloppe et compacité (kWh/m²/an)
        climate: Pondérations de la zone climatique
        usage_factor: Facteur d'usage (0-1)
        heating_system: Système de chauffage
        cooling_system: Système de climatisation
        conditioned_coverage: Part du bâtiment climatisée
        heating_k: Constante de proportionnalité chauffage
        cooling_k: Constante de proportionnalité froid
        gas_boiler_efficiency: Rendement appliqué aux chaudières gaz

    Returns:
        HvacResult (per_square après couverture, besoins bruts chauffage/froid)
    """
    effective_heating_usage = heating_k + (1 - heating_k) * usage_factor
    effective_cooling_usage = cooling_k + (1 - cooling_k) * usage_factor

    heating_load = 0.0
    cooling_load = 0.0

    if heating_system != HeatingSystem.NONE:
        heating_load = hvac_base * climate.heating_factor * effective_heating_usage * (
            climate.winter_weight + 0.5 * climate.mid_season_weight
        )
        if heating_system == HeatingSystem.GAS_BOILER:
            heating_load /= gas_boiler_efficiency

    if cooling_system != CoolingSystem.NONE:
        cooling_load = hvac_base * climate.cooling_factor * effective_cooling_usage * (
            climate.summer_weight + 0.5 * climate.mid_season_weight
        )

    coverage_factor = COVERAGE_FACTORS.get(conditioned_coverage, 1.0)
    per_square = (heating_load + cooling_load) * coverage_factor

    logger.debug(
        f"  HVAC : chauffage {heating_load:.2f}, froid {cooling_load:.2f}, "
        f"couverture ×{coverage_factor} → {per_square:.2f} kWh/m²"
    )

    return HvacResult(
        per_square=per_square,
        heating_load=heating_load,
        cooling_load=cooling_load,
    )
