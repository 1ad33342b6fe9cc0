"""
Couche domaine (core).

Contient les ports (interfaces abstraites) et les objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, loguru, CLI).

Sous-packages :
- ports/ : Interfaces abstraites (bascules de fonctionnalités de l'hôte)
- value_objects/ : Objets valeur immutables (configuration, images, groupes d'épisodes)
"""
