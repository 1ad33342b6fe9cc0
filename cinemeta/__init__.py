"""
cinemeta - Couche d'acces aux metadonnees TMDB avec cache temporise.

Ce package interroge The Movie Database (films, collections, series,
saisons, episodes, personnes) en gardant les resultats en memoire pendant
une heure, et sait remapper les numeros saison/episode des ordres
d'affichage alternatifs (absolu, DVD).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, objets valeur)
- adapters/ : Couche infrastructure (client TMDB, cache, CLI)
"""

__version__ = "0.1.0"
