#!/usr/bin/env python3
"""
Mechanic Quote CLI
Browse the shop catalog and build service quotes from the terminal.
"""

import json
import logging
import sys
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .builder import QuoteBuilder
from .catalog import Catalog, build_default_catalog
from .models import Customer, Mechanic, Quote
from .skill import SkillLevel

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

console = Console()


def render_catalog(catalog: Catalog, mechanics_shown: Optional[List[Mechanic]] = None):
    """Print the mechanics and services tables."""
    if mechanics_shown is None:
        mechanics_shown = catalog.mechanics

    mechanics = Table(title="Mechanics")
    mechanics.add_column("ID", justify="right")
    mechanics.add_column("Name")
    mechanics.add_column("Skill")
    mechanics.add_column("Busy")
    for mechanic in mechanics_shown:
        mechanics.add_row(
            str(mechanic.id),
            mechanic.name,
            mechanic.skill.label,
            "[red]yes[/red]" if mechanic.busy else "[green]no[/green]",
        )

    services = Table(title="Services")
    services.add_column("Service")
    services.add_column("Minimum Skill")
    services.add_column("Price", justify="right")
    for service in catalog.services:
        services.add_row(service.name, service.minimum_skill_required.label, f"${service.price:.2f}")

    console.print(mechanics)
    console.print(services)


def render_quote(quote: Quote):
    """Print a finalized quote as a panel with its services."""
    table = Table(show_header=True)
    table.add_column("Service")
    table.add_column("Minimum Skill")
    table.add_column("Price", justify="right")
    for service in quote.services:
        table.add_row(service.name, service.minimum_skill_required.label, f"${service.price:.2f}")

    lines = [
        f"[bold]Customer:[/bold] {quote.customer.name} <{quote.customer.email}>",
        f"[bold]Car:[/bold] {quote.car}",
        f"[bold]Mechanic:[/bold] {quote.mechanic.name} ({quote.mechanic.skill.label})",
    ]
    if quote.coupon:
        lines.append(f"[bold]Coupon:[/bold] {quote.coupon}")

    console.print(Panel("\n".join(lines), title="Quote", border_style="green"))
    console.print(table)


def report_validity(builder: QuoteBuilder, step: str):
    violations = builder.violations()
    if violations:
        reasons = "; ".join(v.value for v in violations)
        console.print(f"[yellow]{step}[/yellow] -> [red]invalid[/red] ({reasons})")
    else:
        console.print(f"[yellow]{step}[/yellow] -> [green]valid[/green]")


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """Mechanic Quote - build auto-repair service quotes."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def parse_skill(ctx, param, value):
    """click callback turning a skill name or ordinal into a SkillLevel."""
    if value is None:
        return None
    try:
        return SkillLevel.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


@cli.command()
@click.option('--available', is_flag=True, help='Only list mechanics who are not busy')
@click.option('--min-skill', callback=parse_skill, help='Only list mechanics at this level or above (name or 1-4)')
def catalog(available: bool, min_skill: Optional[SkillLevel]):
    """Show the shop's mechanics and services."""
    shop = build_default_catalog()
    shown = shop.available_mechanics() if available else shop.mechanics
    if min_skill is not None:
        shown = [m for m in shown if m.skill >= min_skill]
    render_catalog(shop, shown)


@cli.command()
def demo():
    """Walk through a sample quoting session."""
    shop = build_default_catalog()
    builder = QuoteBuilder(shop)

    console.print(Panel.fit("[bold blue]Mechanic Quote Demo[/bold blue]", border_style="blue"))
    report_validity(builder, "Empty builder")

    builder.set_customer(Customer(
        name="Reza Shirazian",
        address="N Rengstorff Ave Mountain View",
        email="reza@example.com",
    ))
    for name in ("Brake Inspection", "Battery Inspection", "Oil Change"):
        builder.add_service(shop.find_service_by_name(name))
    builder.set_car("Honda")
    builder.set_mechanic()
    report_validity(builder, "Reza's Honda, auto-assigned mechanic")

    quote = builder.result()
    if quote:
        render_quote(quote)

    builder.set_customer(Customer(
        name="Sarah Khosravani",
        address="S Rengstorff Mountain View",
        email="sarah@example.com",
    ))
    builder.add_service(shop.find_service_by_name("Brake Pad Replacement"))

    for name in ("Mike Fulton", "Steve Brimington"):
        accepted = builder.set_mechanic(shop.find_mechanic_by_name(name))
        status = "[green]accepted[/green]" if accepted else "[red]rejected[/red]"
        console.print(f"Assign {name}: {status}")
        report_validity(builder, f"After trying {name}")

    builder.set_mechanic()
    report_validity(builder, f"Auto-assigned {builder.mechanic.name if builder.mechanic else 'nobody'}")

    builder.add_service(shop.find_service_by_name("Timing Belt Replacement"))
    report_validity(builder, "Added Timing Belt Replacement")

    builder.set_mechanic()
    report_validity(builder, f"Re-assigned {builder.mechanic.name if builder.mechanic else 'nobody'}")

    quote = builder.result()
    if quote:
        render_quote(quote)

    console.print()
    render_catalog(shop)


@cli.command()
@click.option('--name', required=True, help='Customer name')
@click.option('--email', required=True, help='Customer email')
@click.option('--address', default='', help='Customer address')
@click.option('--car', required=True, help='Car make/model')
@click.option('--service', 'services', multiple=True, required=True, help='Service name (repeatable)')
@click.option('--mechanic', default=None, help='Mechanic name (default: auto-assign)')
@click.option('--coupon', default=None, help='Coupon code')
@click.option('--json', 'as_json', is_flag=True, help='Output the quote as JSON')
def quote(name: str, email: str, address: str, car: str, services: Tuple[str, ...],
          mechanic: Optional[str], coupon: Optional[str], as_json: bool):
    """Build a single quote against the default catalog."""
    shop = build_default_catalog()
    builder = QuoteBuilder(shop)

    builder.set_customer(Customer(name=name, address=address, email=email))
    builder.set_car(car)
    if coupon:
        builder.set_coupon(coupon)

    for service_name in services:
        service = shop.find_service_by_name(service_name)
        if service is None:
            raise click.BadParameter(f"Unknown service: {service_name}", param_hint="--service")
        builder.add_service(service)

    if mechanic:
        chosen = shop.find_mechanic_by_name(mechanic)
        if chosen is None:
            raise click.BadParameter(f"Unknown mechanic: {mechanic}", param_hint="--mechanic")
        rejection = builder.check_mechanic(chosen)
        if rejection is not None:
            click.echo(f"Cannot assign {chosen.name}: {rejection.value}", err=True)
        builder.set_mechanic(chosen)
    else:
        builder.set_mechanic()

    violations = builder.violations()
    result = builder.result()
    if result is None:
        for violation in violations:
            click.echo(f"Quote invalid: {violation.value}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        render_quote(result)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
