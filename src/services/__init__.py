"""
Services Module
Request orchestration over the data pipeline and storage
"""

from .aggregator import TravelInfoAggregator

__all__ = ['TravelInfoAggregator']
