"""
Storage Module
Repository interface and in-memory implementation
"""

from .repository import TravelRepository, InMemoryTravelRepository

__all__ = ['TravelRepository', 'InMemoryTravelRepository']
