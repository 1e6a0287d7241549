# audit_energetique/services/tariff_calculator.py
"""
Conversions tarifaires STEG.

- Facture mensuelle → consommation annuelle
- Intensité énergétique (kWh/m²/an)
- Coût selon le barème progressif Non-résidentiel BT

Exemple barème progressif pour 400 kWh/mois :
    200 × 0.195 + 100 × 0.240 + 100 × 0.333 = 96.30 DT
"""

from typing import Optional

import numpy as np

from ..constants import TARIFF_RATES, NON_RESIDENTIAL_BT_BRACKETS, MONTHS_PER_YEAR
from ..contracts import ProgressiveTariffResult, BracketDetail
from ..enums import TariffType


def compute_annual_consumption_from_bill(
    monthly_bill_amount: float,
    tariff_type: Optional[TariffType]
) -> float:
    """
    E_annuelle = (Facture_mensuelle / Tarif) × 12

    Args:
        monthly_bill_amount: Montant mensuel de la facture (TND)
        tariff_type: Niveau de tension (BT par défaut si inconnu)

    Returns:
        Consommation annuelle (kWh), arrondie à 2 décimales
    """
    rate = TARIFF_RATES.get(tariff_type, TARIFF_RATES[TariffType.BT])

    if rate == 0:
        return 0

    monthly_consumption = monthly_bill_amount / rate
    return round(monthly_consumption * MONTHS_PER_YEAR, 2)


def compute_energy_intensity(annual_consumption: float, surface_area: float) -> float:
    """Intensité énergétique (kWh/m²/an), 0 si surface invalide."""
    if surface_area <= 0:
        return 0

    return round(annual_consumption / surface_area, 2)


def compute_progressive_tariff(monthly_consumption: float) -> ProgressiveTariffResult:
    """
    Coût de l'électricité selon le barème progressif Non-résidentiel BT.

    Chaque tranche est facturée à son propre prix, comme un impôt progressif.

    Args:
        monthly_consumption: Consommation mensuelle (kWh)

    Returns:
        ProgressiveTariffResult avec le détail des tranches consommées
    """
    if monthly_consumption <= 0:
        return ProgressiveTariffResult(
            monthly_cost=0,
            annual_cost=0,
            effective_rate=0,
            bracket_details=[],
        )

    bornes = np.array(NON_RESIDENTIAL_BT_BRACKETS, dtype=float)
    mins, maxs, rates = bornes[:, 0], bornes[:, 1], bornes[:, 2]

    # kWh consommés dans chaque tranche
    consumptions = np.clip(monthly_consumption - mins, 0, maxs - mins)
    costs = consumptions * rates

    bracket_details = [
        BracketDetail(
            min=float(lo),
            max=float(hi),
            rate=float(rate),
            consumption=round(float(kwh), 2),
            cost=round(float(cost), 3),
        )
        for lo, hi, rate, kwh, cost in zip(mins, maxs, rates, consumptions, costs)
        if kwh > 0
    ]

    monthly_cost = float(costs.sum())

    return ProgressiveTariffResult(
        monthly_cost=round(monthly_cost, 3),
        annual_cost=round(monthly_cost * MONTHS_PER_YEAR, 2),
        effective_rate=round(monthly_cost / monthly_consumption, 4),
        bracket_details=bracket_details,
    )
