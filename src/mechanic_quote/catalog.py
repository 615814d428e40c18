"""
Reference roster of mechanics and services offered by the shop.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from .models import Mechanic, Service
from .skill import SkillLevel

logger = logging.getLogger(__name__)


DEFAULT_MECHANICS = [
    ("Steve Brimington", SkillLevel.JUNIOR),
    ("Mike Fulton", SkillLevel.JUNIOR),
    ("Ali Bellevue", SkillLevel.JUNIOR),
    ("Dick Duchess", SkillLevel.APPRENTICE),
    ("Shane Inglewood", SkillLevel.APPRENTICE),
    ("Trevor Matters", SkillLevel.APPRENTICE),
    ("Moris King", SkillLevel.EXPERIENCED),
    ("Nick Main", SkillLevel.EXPERIENCED),
    ("Zane Marine", SkillLevel.MASTER),
]

DEFAULT_SERVICES = [
    ("Brake Inspection", SkillLevel.JUNIOR, "15.00"),
    ("Battery Inspection", SkillLevel.JUNIOR, "17.00"),
    ("Oil Change", SkillLevel.JUNIOR, "35.00"),
    ("Door Latch Replacement", SkillLevel.JUNIOR, "33.00"),
    ("Lubricate Trunk", SkillLevel.JUNIOR, "19.00"),
    ("Air Filter Replacement", SkillLevel.JUNIOR, "39.00"),
    ("Brake Motor Replacement", SkillLevel.APPRENTICE, "115.00"),
    ("Brake Pad Replacement", SkillLevel.APPRENTICE, "89.00"),
    ("Battery Replacement", SkillLevel.APPRENTICE, "110.00"),
    ("Timing Belt Replacement", SkillLevel.MASTER, "250.00"),
    ("Power Steering Replacement", SkillLevel.MASTER, "270.00"),
]


class IdSequence:
    """Monotonically increasing id generator, starting at ``start``."""

    def __init__(self, start: int = 1):
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


class Catalog:
    """
    Mechanics and services available for quoting.

    Lookups are side-effect free; only the quote builder flips a
    mechanic's busy flag when a quote is finalized.
    """

    def __init__(self, id_sequence: Optional[IdSequence] = None):
        self.id_sequence = id_sequence or IdSequence()
        self.mechanics: List[Mechanic] = []
        self.services: List[Service] = []

    def add_mechanic(self, name: str, skill: SkillLevel) -> Mechanic:
        mechanic = Mechanic(id=self.id_sequence.next_id(), name=name, skill=skill)
        self.mechanics.append(mechanic)
        logger.debug(f"Registered mechanic #{mechanic.id}: {name} ({skill.label})")
        return mechanic

    def add_service(self, service: Service) -> Service:
        """
        Register a service, keeping the first registration for a given name.

        Returns:
            The registered service, which is the existing one when the
            name was already taken
        """
        for existing in self.services:
            if existing == service:
                if (existing.price != service.price
                        or existing.minimum_skill_required != service.minimum_skill_required):
                    logger.warning(
                        f"Service '{service.name}' already registered with "
                        f"{existing.minimum_skill_required.label}/{existing.price}; "
                        f"ignoring {service.minimum_skill_required.label}/{service.price}"
                    )
                return existing

        self.services.append(service)
        return service

    def find_mechanic_by_name(self, name: str) -> Optional[Mechanic]:
        return next((m for m in self.mechanics if m.name == name), None)

    def find_service_by_name(self, name: str) -> Optional[Service]:
        return next((s for s in self.services if s.name == name), None)

    def find_available_mechanic_for(self, service: Service) -> Optional[Mechanic]:
        """
        First idle mechanic ranked strictly above the service's requirement.

        This is stricter than the builder's own qualification rule, which
        accepts a mechanic at exactly the required level.
        """
        for mechanic in self.mechanics:
            if mechanic.skill > service.minimum_skill_required and not mechanic.busy:
                return mechanic
        return None

    def available_mechanics(self) -> List[Mechanic]:
        return [m for m in self.mechanics if not m.busy]


def build_default_catalog(id_sequence: Optional[IdSequence] = None) -> Catalog:
    """Create a catalog seeded with the shop's standard roster and services."""
    catalog = Catalog(id_sequence)

    for name, skill in DEFAULT_MECHANICS:
        catalog.add_mechanic(name, skill)

    for name, skill, price in DEFAULT_SERVICES:
        catalog.add_service(Service(name, skill, Decimal(price)))

    logger.debug(
        f"Default catalog ready: {len(catalog.mechanics)} mechanics, "
        f"{len(catalog.services)} services"
    )
    return catalog
