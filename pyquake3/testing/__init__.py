"""
Testing helpers for pyquake3
"""

from .mock_server import MockQuake3Server, ServerScenario, ServerState, default_scenario

__all__ = ['MockQuake3Server', 'ServerScenario', 'ServerState', 'default_scenario']
