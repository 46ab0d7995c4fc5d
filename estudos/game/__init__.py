"""Geometry, timer, entities and game state of the space shooter, without rendering."""