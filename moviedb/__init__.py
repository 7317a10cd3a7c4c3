"""
MovieDB - Catalogue de films en memoire.

Ce package fournit un catalogue borne de films avec operations CRUD,
filtres (langue, annee, note), recherche par nom et persistance binaire.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (catalogue)
- infrastructure/ : Persistance (format binaire, fichier d'exemples)
- adapters/ : Interface CLI (Typer + Rich)
"""

__version__ = "0.1.0"
