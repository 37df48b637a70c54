"""Battlefield, fleet and game engine domain logic."""
