#!/usr/bin/env python3
"""
Wine pairing script.

Ranks the dataset's wines against a dish and prints the top three with the
reasoning behind each score.
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pairing_method.error_handling import PairingError, user_message
from pairing_method.render import render_error, render_results
from pairing_method.report import pairing_matrix
from pairing_method.session import PairingSession


def create_matrix_table(session):
    """Dish x wine score grid."""
    matrix = pairing_matrix(session.foods, session.wines)

    table = Table(
        title="🍷 Pairing Matrix",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
        title_style="bold white"
    )
    table.add_column("Dish", style="cyan")
    for wine_name in matrix.columns:
        table.add_column(wine_name, justify="center")

    for dish, row in matrix.iterrows():
        table.add_row(dish, *(str(score) for score in row))

    return table


def main():
    """Main execution function."""
    parser = argparse.ArgumentParser(description="Rank wines for a dish.")
    parser.add_argument("dish", nargs="*", help="Dish name, as listed in foods.json")
    parser.add_argument("--foods", type=Path, default=None, help="Path to foods.json")
    parser.add_argument("--wines", type=Path, default=None, help="Path to wines.json")
    parser.add_argument("--matrix", action="store_true", help="Print every dish against every wine")
    args = parser.parse_args()

    console = Console()

    console.print()
    console.print(Panel.fit(
        "[bold white]🍷 Pairing Method[/bold white]\n"
        "[dim]Deterministic structural pairing[/dim]",
        border_style="cyan"
    ))
    console.print()

    try:
        session = PairingSession.from_files(args.foods, args.wines)
    except PairingError as e:
        render_error(user_message(e), console)
        return 1

    if args.matrix:
        console.print(create_matrix_table(session))
        console.print()
        return 0

    dish = " ".join(args.dish)
    if dish:
        console.print(f"[bold white]Dish:[/bold white] {dish}\n")

    try:
        results = session.recommend(dish)
    except PairingError as e:
        render_error(user_message(e), console)
        console.print(f"\n[dim]Available dishes: {', '.join(session.food_names())}[/dim]")
        return 1

    render_results(results, console)
    console.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
