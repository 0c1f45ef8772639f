"""
API Module
FastAPI application and routes for the travel info service
"""

from .app import create_app

__all__ = ['create_app']
