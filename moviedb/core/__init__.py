"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites) et objets valeur.
Cette couche n'a AUCUNE dependance vers l'infrastructure (fichiers, CLI).

Sous-packages :
- entities/ : Entites metier (Movie)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immuables (RatingScale)
"""
