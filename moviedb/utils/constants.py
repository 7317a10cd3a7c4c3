"""
Constantes globales pour MovieDB.

Ce module contient les constantes utilisees dans l'application:
- Bornes de validation des annees de sortie
- Capacite par defaut du catalogue
- Format du fichier d'exemples (delimiteur, nombre de champs)
"""

# Premier film connu (1888) et limite raisonnable pour les sorties annoncees
YEAR_MIN = 1888
YEAR_MAX = 2030

# Nombre maximum de films dans un catalogue par defaut
DEFAULT_CAPACITY = 100

# Format du fichier d'exemples : name|id|year|language|rating
SEED_DELIMITER = "|"
SEED_FIELD_COUNT = 5
SEED_COMMENT_PREFIX = "#"
