[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estudos"
version = "0.1.0"
description = "Small JSON web services (job openings, polls, todos, products), a few concurrency exercises and the rules of a space shooter game."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["flask", "rest", "api", "polls", "todos", "sqlite", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
estudos-opportunities = "estudos.opportunities.app:main"
estudos-polls = "estudos.polls.app:main"
estudos-todos = "estudos.todos.app:main"
estudos-products = "estudos.products.web:main"

[tool.hatch.build.targets.wheel]
packages = ["estudos"]

[tool.pytest.ini_options]
addopts = "-ra"
