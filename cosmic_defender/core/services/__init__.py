"""
Service exports: event channel and the shared input record.
"""

from cosmic_defender.core.services.event_manager import EventManager
from cosmic_defender.core.services.input_state import InputState

__all__ = [
    'EventManager',
    'InputState',
]
