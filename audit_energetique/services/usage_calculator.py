# audit_energetique/services/usage_calculator.py
"""
Facteur d'usage annuel d'un bâtiment.

F_usage = (Heures/jour × Jours/semaine × 52) / 8760
"""

import numpy as np

from ..constants import HOURS_PER_YEAR, WEEKS_PER_YEAR


def compute_usage_factor(hours_per_day: float, days_per_week: float) -> float:
    """
    Calcule le facteur d'usage à partir des horaires d'ouverture.

    Aucune validation ici : les valeurs hors bornes sont ramenées dans [0, 1].

    Args:
        hours_per_day: Heures d'ouverture par jour
        days_per_week: Jours d'ouverture par semaine

    Returns:
        Facteur d'usage entre 0 et 1
    """
    annual_operating_hours = hours_per_day * days_per_week * WEEKS_PER_YEAR
    usage_factor = np.nan_to_num(annual_operating_hours / HOURS_PER_YEAR, nan=0.0)

    return float(np.clip(usage_factor, 0.0, 1.0))
