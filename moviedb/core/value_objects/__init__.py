"""
Objets valeur du domaine.

Objets immuables sans identite, compares par valeur.

Exports :
- RatingScale : Echelle de notation (1-5 entiere ou 1.0-10.0 decimale)
"""

from moviedb.core.value_objects.rating_scale import RatingScale

__all__ = [
    "RatingScale",
]
