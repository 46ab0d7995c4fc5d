"""Polls service: models, SQLite store and HTTP API with voting."""