"""
Quote builder: accumulates a customer, car, services and mechanic and
emits an immutable Quote once the combination is valid.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional

from .catalog import Catalog
from .models import Customer, Mechanic, Quote, Service
from .skill import SkillLevel

logger = logging.getLogger(__name__)


class QuoteViolation(Enum):
    """Reasons a mechanic assignment or a quote is rejected."""
    MECHANIC_BUSY = "mechanic is busy"
    MECHANIC_UNDERQUALIFIED = "mechanic cannot perform the requested services"
    NO_MECHANIC = "no mechanic is set"
    NO_SERVICES = "no service selected"
    NO_CUSTOMER = "no customer is set"
    NO_CAR = "no car is set"


class QuoteBuildable(ABC):
    """Operations a quote builder exposes."""

    @abstractmethod
    def set_mechanic(self, mechanic: Optional[Mechanic] = None) -> bool:
        pass

    @abstractmethod
    def add_service(self, service: Service) -> None:
        pass

    @abstractmethod
    def remove_service(self, service: Service) -> None:
        pass

    @abstractmethod
    def set_customer(self, customer: Customer) -> None:
        pass

    @abstractmethod
    def set_car(self, car: str) -> None:
        pass

    @abstractmethod
    def set_coupon(self, coupon: str) -> None:
        pass

    @abstractmethod
    def result(self) -> Optional[Quote]:
        pass

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        pass


class QuoteBuilder(QuoteBuildable):
    """
    Stateful accumulator for a single quote at a time.

    Validity is never cached: it is recomputed from the candidate fields
    on every access, so adding a service can invalidate a mechanic that
    was qualified when it was assigned.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.mechanic: Optional[Mechanic] = None
        self.customer: Optional[Customer] = None
        self.car: Optional[str] = None
        self.coupon: Optional[str] = None
        # keyed by service name, insertion ordered
        self._services: Dict[str, Service] = {}

    @property
    def services(self) -> List[Service]:
        return list(self._services.values())

    @property
    def highest_skill_required(self) -> Optional[SkillLevel]:
        """Highest minimum skill among requested services, None when empty."""
        if not self._services:
            return None
        return max(s.minimum_skill_required for s in self._services.values())

    def set_customer(self, customer: Customer) -> None:
        self.customer = customer

    def set_car(self, car: str) -> None:
        self.car = car

    def set_coupon(self, coupon: str) -> None:
        self.coupon = coupon

    def add_service(self, service: Service) -> None:
        if service.name not in self._services:
            self._services[service.name] = service

    def remove_service(self, service: Service) -> None:
        self._services.pop(service.name, None)

    def check_mechanic(self, mechanic: Mechanic) -> Optional[QuoteViolation]:
        """
        Check whether a mechanic may be assigned to the current services.

        Args:
            mechanic: Candidate mechanic

        Returns:
            The violation preventing assignment, or None if assignable
        """
        if mechanic.busy:
            return QuoteViolation.MECHANIC_BUSY
        if not self._can_perform_services(mechanic):
            return QuoteViolation.MECHANIC_UNDERQUALIFIED
        return None

    def set_mechanic(self, mechanic: Optional[Mechanic] = None) -> bool:
        """
        Assign a mechanic to the quote.

        With an explicit mechanic, the assignment is rejected when that
        mechanic is busy or under-qualified for the requested services.
        Without one, the first idle catalog mechanic qualified for every
        requested service is chosen.

        Returns:
            True if a mechanic was assigned, False if the candidate was
            left unchanged
        """
        if mechanic is None:
            return self._auto_assign_mechanic()

        violation = self.check_mechanic(mechanic)
        if violation is QuoteViolation.MECHANIC_BUSY:
            logger.warning(f"{mechanic.name} is busy")
            return False
        if violation is QuoteViolation.MECHANIC_UNDERQUALIFIED:
            logger.warning(f"{mechanic.name} cannot perform the services requested for this quote")
            return False

        self.mechanic = mechanic
        logger.debug(f"Assigned {mechanic.name} ({mechanic.skill.label})")
        return True

    def _auto_assign_mechanic(self) -> bool:
        required = self.highest_skill_required
        if required is None:
            logger.debug("No services requested; cannot pick a mechanic")
            return False

        for candidate in self.catalog.mechanics:
            if not candidate.busy and candidate.skill >= required:
                self.mechanic = candidate
                logger.debug(f"Auto-assigned {candidate.name} ({candidate.skill.label})")
                return True

        logger.debug(f"No idle mechanic at {required.label} level or above")
        return False

    def _can_perform_services(self, mechanic: Mechanic) -> bool:
        required = self.highest_skill_required
        return required is None or mechanic.skill >= required

    def violations(self) -> List[QuoteViolation]:
        """List every condition currently preventing a quote."""
        found = []

        if self.mechanic is None:
            found.append(QuoteViolation.NO_MECHANIC)
        elif not self._can_perform_services(self.mechanic):
            found.append(QuoteViolation.MECHANIC_UNDERQUALIFIED)

        if not self._services:
            found.append(QuoteViolation.NO_SERVICES)
        if self.customer is None:
            found.append(QuoteViolation.NO_CUSTOMER)
        if self.car is None:
            found.append(QuoteViolation.NO_CAR)

        for violation in found:
            logger.debug(f"Quote invalid: {violation.value}")
        return found

    @property
    def is_valid(self) -> bool:
        return not self.violations()

    def result(self) -> Optional[Quote]:
        """
        Finalize the quote.

        Marks the assigned mechanic busy and clears the customer, mechanic
        and services. The car and coupon carry over to the next quote.

        The busy flag is checked when a mechanic is assigned, not here, so
        two builders sharing a catalog can both finalize the same mechanic.

        Returns:
            The Quote, or None if the builder is not valid
        """
        violations = self.violations()
        if violations:
            logger.info(
                "Quote not finalized: " + ", ".join(v.value for v in violations)
            )
            return None

        self.mechanic.busy = True
        quote = Quote(
            mechanic=self.mechanic,
            services=tuple(self._services.values()),
            customer=self.customer,
            car=self.car,
            coupon=self.coupon,
        )
        logger.info(
            f"Quote finalized for {quote.customer.email}: "
            f"{len(quote.services)} service(s) with {quote.mechanic.name}"
        )

        self._clear()
        return quote

    def _clear(self):
        self.mechanic = None
        self.customer = None
        self._services.clear()
