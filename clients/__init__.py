"""
Clients for external services
"""

from .jamai_client import JamAIClient

__all__ = ['JamAIClient']
