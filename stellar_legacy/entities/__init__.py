"""Game entity definitions."""

from .base import BaseEntity
from .resources import Resources
from .crew import CrewMember, CrewSkills
from .ship import Ship, ShipComponents, ShipStats
from .galaxy import StarSystem, Planet, TradeRoute, Coordinates
from .market import Market
from .legacy import Legacy
from .notification import Notification

__all__ = [
    "BaseEntity", "Resources", "CrewMember", "CrewSkills", "Ship", "ShipComponents",
    "ShipStats", "StarSystem", "Planet", "TradeRoute", "Coordinates", "Market", "Legacy",
    "Notification",
]
