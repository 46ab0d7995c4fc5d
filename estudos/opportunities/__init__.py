"""Job openings service: logger, records, request validation, SQLite store and HTTP API."""