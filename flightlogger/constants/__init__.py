from .connection import FGConnectionConstants
from .flightgear import FGProps

__all__ = ['FGConnectionConstants', 'FGProps']
