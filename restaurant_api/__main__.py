"""Allows `python -m restaurant_api` to start the server."""

from restaurant_api.main import run

run()
