"""
Mechanic Quote

Builds auto-repair service quotes, pairing requested services with a
mechanic qualified to perform them.
"""

__version__ = "1.0.0"

from .skill import SkillLevel
from .models import Customer, Mechanic, Quote, Service
from .catalog import Catalog, IdSequence, build_default_catalog
from .builder import QuoteBuildable, QuoteBuilder, QuoteViolation

__all__ = [
    "SkillLevel",
    "Customer",
    "Mechanic",
    "Quote",
    "Service",
    "Catalog",
    "IdSequence",
    "build_default_catalog",
    "QuoteBuildable",
    "QuoteBuilder",
    "QuoteViolation",
]
