"""
App Django: audit_energetique

Calculs de l'audit énergétique des bâtiments tertiaires et industriels
(facteurs d'usage et d'enveloppe, charges HVAC / ECS / équipements,
répartition électricité-gaz, classement BECTh, recommandations).
"""
