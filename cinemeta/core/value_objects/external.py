"""
Objets valeur pour la recherche par identifiant externe.
"""

from enum import Enum


class ExternalSource(Enum):
    """Sources d'identifiants externes acceptees par /find/{external_id}.

    La valeur est envoyee telle quelle dans le parametre external_source.
    """

    IMDB = "imdb_id"
    TVDB = "tvdb_id"
    TVRAGE = "tvrage_id"
    FACEBOOK = "facebook_id"
    TWITTER = "twitter_id"
    INSTAGRAM = "instagram_id"
    WIKIDATA = "wikidata_id"
    TIKTOK = "tiktok_id"
    YOUTUBE = "youtube_id"
