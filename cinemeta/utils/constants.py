"""
Constantes globales pour cinemeta.

Ce module contient les constantes partagees entre les adaptateurs:
- Duree de vie du cache
- Nom du fournisseur reporte dans les images
- Donnees annexes demandees par type d'entite (append_to_response)
"""

# Duree de vie unique pour toutes les entrees du cache (1 heure)
CACHE_TTL_SECONDS = 60 * 60

# Nom du fournisseur reporte dans RemoteImageInfo
PROVIDER_NAME = "TheMovieDb"

TMDB_BASE_URL = "https://api.themoviedb.org/3"

# Au-dela de cette longueur, la cle est un Read Access Token v4 (JWT)
V4_TOKEN_MIN_LENGTH = 41

# Donnees annexes embarquees dans chaque reponse (append_to_response)
MOVIE_EXTRAS = ("credits", "releases", "images", "videos", "external_ids")
COLLECTION_EXTRAS = ("images",)
SERIES_EXTRAS = (
    "credits",
    "images",
    "external_ids",
    "videos",
    "content_ratings",
    "episode_groups",
)
SEASON_EXTRAS = ("credits", "images", "external_ids", "videos")
EPISODE_EXTRAS = ("credits", "images", "external_ids", "videos")
PERSON_EXTRAS = ("tv_credits", "movie_credits", "images", "external_ids")

# Extra optionnel, omis quand l'hote exclut les tags
KEYWORDS_EXTRA = "keywords"
