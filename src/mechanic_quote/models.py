"""
Data models for the Mechanic Quote builder.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Tuple

from .skill import SkillLevel


@dataclass(eq=False)
class Mechanic:
    """A shop mechanic. Identity is the catalog-assigned id."""
    id: int
    name: str
    skill: SkillLevel
    busy: bool = False

    def _key(self) -> int:
        return self.id

    def __eq__(self, other):
        if not isinstance(other, Mechanic):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "skill": self.skill.label,
            "busy": self.busy,
        }


@dataclass(frozen=True, eq=False)
class Service:
    """An offered service. Identity is the service name."""
    name: str
    minimum_skill_required: SkillLevel
    price: Decimal = field(default=Decimal("0"))

    def __post_init__(self):
        try:
            price = Decimal(str(self.price))
        except InvalidOperation:
            raise ValueError(f"Invalid price for {self.name}: {self.price!r}") from None
        if not price.is_finite():
            raise ValueError(f"Price for {self.name} must be finite: {price}")
        if price < 0:
            raise ValueError(f"Price for {self.name} cannot be negative: {price}")
        object.__setattr__(self, "price", price)

    def _key(self) -> str:
        return self.name

    def __eq__(self, other):
        if not isinstance(other, Service):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "minimumSkillRequired": self.minimum_skill_required.label,
            "price": f"{self.price:.2f}",
        }


@dataclass(frozen=True, eq=False)
class Customer:
    """A customer requesting a quote. Identity is the email address."""
    name: str
    address: str
    email: str

    def _key(self) -> str:
        return self.email

    def __eq__(self, other):
        if not isinstance(other, Customer):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "address": self.address, "email": self.email}


@dataclass(frozen=True)
class Quote:
    """A finalized service quote."""
    mechanic: Mechanic
    services: Tuple[Service, ...]
    customer: Customer
    car: str
    coupon: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mechanic": self.mechanic.to_dict(),
            "services": [service.to_dict() for service in self.services],
            "customer": self.customer.to_dict(),
            "car": self.car,
            "coupon": self.coupon,
        }
