"""
Entites metier representant les concepts du domaine.

Les entites sont des objets mutables avec une identite.
Elles encapsulent les regles de validation de leurs champs.

Exports:
- Movie: Un film du catalogue
"""

from moviedb.core.entities.movie import Movie

__all__ = [
    "Movie",
]
