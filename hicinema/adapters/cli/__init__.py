"""Interface ligne de commande HiCinema (Typer + Rich)."""
