"""Interface ligne de commande (Typer) de cinemeta."""
