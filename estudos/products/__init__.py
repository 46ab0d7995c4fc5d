"""Products service: entity, use cases, SQL repository and HTTP handlers."""