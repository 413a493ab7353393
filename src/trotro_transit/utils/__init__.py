"""Utility modules for trotro-transit."""

from .geo import EARTH_RADIUS_KM, haversine_distance

__all__ = ["EARTH_RADIUS_KM", "haversine_distance"]
