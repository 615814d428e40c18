#!/usr/bin/env python3
"""
Example usage of the Mechanic Quote builder
Builds two quotes against the default catalog and prints each step.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mechanic_quote import Customer, QuoteBuilder, build_default_catalog


def show(builder, step):
    """Print builder validity after a step."""
    violations = builder.violations()
    status = "valid" if not violations else "invalid: " + ", ".join(v.value for v in violations)
    print(f"{step:<45} {status}")


def main():
    catalog = build_default_catalog()
    builder = QuoteBuilder(catalog)

    print("=" * 60)
    print("QUOTE 1: Routine inspection")
    print("=" * 60)
    show(builder, "Empty builder")

    builder.set_customer(Customer("Reza Shirazian", "N Rengstorff Ave Mountain View", "reza@example.com"))
    builder.add_service(catalog.find_service_by_name("Brake Inspection"))
    builder.add_service(catalog.find_service_by_name("Battery Inspection"))
    builder.add_service(catalog.find_service_by_name("Oil Change"))
    builder.set_car("Honda")
    builder.set_mechanic()
    show(builder, "Customer, car, 3 services, auto mechanic")

    quote = builder.result()
    print(json.dumps(quote.to_dict(), indent=2))

    print("\n" + "=" * 60)
    print("QUOTE 2: Brake pads, then a timing belt")
    print("=" * 60)
    builder.set_customer(Customer("Sarah Khosravani", "S Rengstorff Mountain View", "sarah@example.com"))
    builder.add_service(catalog.find_service_by_name("Brake Pad Replacement"))

    builder.set_mechanic(catalog.find_mechanic_by_name("Mike Fulton"))
    show(builder, "Tried Mike Fulton (Junior)")
    builder.set_mechanic(catalog.find_mechanic_by_name("Steve Brimington"))
    show(builder, "Tried Steve Brimington (busy)")
    builder.set_mechanic()
    show(builder, f"Auto-assigned {builder.mechanic.name}")

    builder.add_service(catalog.find_service_by_name("Timing Belt Replacement"))
    show(builder, "Added Timing Belt Replacement")
    builder.set_mechanic()
    show(builder, f"Auto-assigned {builder.mechanic.name}")

    quote = builder.result()
    print(json.dumps(quote.to_dict(), indent=2))


if __name__ == "__main__":
    main()
