"""
Énumérations du questionnaire d'audit énergétique.

Les valeurs correspondent aux libellés affichés dans le formulaire,
ce qui permet de reconstruire les membres directement depuis le payload.
"""

from enum import Enum


class BuildingType(Enum):
    """Types de bâtiments pris en charge."""
    PHARMACY = "Pharmacie"
    CAFE_RESTAURANT = "Café / Restaurant"
    BEAUTY_CENTER = "Centre esthétique / Spa"
    HOTEL_GUESTHOUSE = "Hôtel"
    CLINIC_MEDICAL = "Clinique / Centre médical"
    OFFICE_ADMIN_BANK = "Bureau / Administration / Banque"
    LIGHT_WORKSHOP = "Atelier léger / Artisanat / Menuiserie"
    HEAVY_FACTORY = "Usine lourde / Mécanique / Métallurgie"
    TEXTILE_PACKAGING = "Industrie textile / Emballage"
    FOOD_INDUSTRY = "Industrie alimentaire"
    PLASTIC_INJECTION = "Industrie plastique / Injection"
    COLD_AGRO_INDUSTRY = "Industrie agroalimentaire réfrigérée"
    SCHOOL_TRAINING = "École / Centre de formation"
    SERVICE = "Service Tertiaire"


class ClimateZone(Enum):
    NORTH = "Nord"
    CENTER = "Centre"
    SOUTH = "Sud"


# ==============================================================================
# ENVELOPPE
# ==============================================================================

class InsulationQuality(Enum):
    LOW = "Isolation faible"
    MEDIUM = "Isolation moyenne"
    HIGH = "Isolation bonne"


class GlazingType(Enum):
    SINGLE = "Simple vitrage"
    DOUBLE = "Double vitrage"


class VentilationSystem(Enum):
    NONE = "Pas de VMC"
    SINGLE_FLOW = "VMC simple flux"
    DOUBLE_FLOW = "VMC double flux"


class FloorBand(Enum):
    """Tranches de nombre d'étages pour le facteur de compacité."""
    SINGLE = "1 étage"
    TWO_OR_THREE = "2 ou 3 étages"
    FOUR_OR_MORE = "4 étages ou plus"


# ==============================================================================
# SYSTÈMES
# ==============================================================================

class HeatingSystem(Enum):
    NONE = "Aucun chauffage"
    ELECTRIC_INDIVIDUAL = "Chauffage électrique individuel"
    REVERSIBLE_AC = "Chauffage par climatisation réversible"
    GAS_BOILER = "Chaudière gaz"
    ELECTRIC_BOILER = "Chaudière électrique"
    OTHER = "Autre système de chauffage"


class CoolingSystem(Enum):
    NONE = "Aucune climatisation"
    SPLIT = "Climatisation split"
    CENTRAL = "Climatisation centrale"


class ConditionedCoverage(Enum):
    FEW_ROOMS = "Quelques pièces"
    HALF_BUILDING = "Environ la moitié du bâtiment"
    MOST_BUILDING = "Presque tout le bâtiment"


class DomesticHotWaterType(Enum):
    """Production d'eau chaude sanitaire (ECS)."""
    NONE = "Aucune production ECS"
    ELECTRIC = "Chauffe-eau électrique"
    GAS = "Chaudière gaz"
    SOLAR = "Chauffe-eau solaire"
    HEAT_PUMP = "Pompe à chaleur ECS"


# ==============================================================================
# USAGES
# ==============================================================================

class LightingType(Enum):
    INCANDESCENT = "Ampoules classiques"
    FLUORESCENT = "Tubes fluorescents"
    LED = "Éclairage LED"


class ExistingMeasure(Enum):
    """Mesures d'efficacité déjà en place sur le site."""
    LED = "Éclairage à haute efficacité"
    SOLAR_PV = "Installation solaire photovoltaïque existante"
    VARIATORS = "Variateurs de vitesse sur moteurs / compresseurs"
    MONITORING = "Système de suivi des consommations (monitoring)"
    HIGH_EFFICIENCY_HVAC = "Climatisation / chauffage à haute efficacité"
    OTHER = "Autres dispositifs d'efficacité énergétique"


class EquipmentCategory(Enum):
    LIGHTING = "Éclairage"
    OFFICE = "Bureautique"
    COMMERCIAL_COOLING = "Froid commercial / Réfrigération"
    KITCHEN = "Cuisine / Cuisson"
    SPECIFIC_EQUIPMENT = "Équipements spécifiques"
    PRODUCTION_MACHINERY = "Machines de production / Ateliers"
    COMPRESSORS = "Compresseurs / Air comprimé"
    PUMPS_CONVEYORS = "Pompes & Convoyeurs"
    INDUSTRIAL_COLD = "Froid industriel / Chambres froides"
    AUXILIARY_EQUIPMENT = "Équipements auxiliaires"


# ==============================================================================
# TARIFS ET CLASSEMENTS
# ==============================================================================

class TariffType(Enum):
    """Niveaux de tension STEG."""
    BT = "Basse tension"
    MT = "Moyenne tension"
    HT = "Haute tension"


class EnergyClass(Enum):
    """Classes énergétiques réglementaires des bâtiments de bureaux (1 = meilleure)."""
    CLASS_1 = "Classe 1"
    CLASS_2 = "Classe 2"
    CLASS_3 = "Classe 3"
    CLASS_4 = "Classe 4"
    CLASS_5 = "Classe 5"
    CLASS_6 = "Classe 6"
    CLASS_7 = "Classe 7"
    CLASS_8 = "Classe 8"


class CarbonGrade(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    NOT_APPLICABLE = "N/A"
