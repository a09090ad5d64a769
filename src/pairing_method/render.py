"""Terminal rendering of pairing results with rich."""

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from pairing_method.error_handling import DEFAULT_ERROR_MESSAGE
from pairing_method.schema import PairingResult

EMPTY_RESULTS_MESSAGE = "No pairings found. Try another dish."


def _score_style(score: int) -> str:
    """Color-code pairing strength."""
    if score >= 75:
        return "bold green"
    elif score >= 50:
        return "bold yellow"
    return "bold red"


def create_result_panel(result: PairingResult) -> Panel:
    """One card: wine name, pairing strength and the reasoning bullets."""
    body = Text()
    body.append(f"Pairing Strength: {result.score}%", style=_score_style(result.score))
    for reason in result.reasoning:
        body.append(f"\n• {reason}")

    return Panel(
        body,
        title=Text(result.name, style="bold white"),
        title_align="left",
        box=box.ROUNDED,
        border_style="magenta"
    )


def render_results(results: Sequence[PairingResult], console: Optional[Console] = None) -> None:
    """Print result cards, or the empty-state message when there are none."""
    if console is None:
        console = Console()

    if not results:
        console.print(EMPTY_RESULTS_MESSAGE)
        return

    for result in results:
        console.print(create_result_panel(result))


def render_error(message: Optional[str], console: Optional[Console] = None) -> None:
    """Print a single plain-text error line."""
    if console is None:
        console = Console()
    console.print(Text(message or DEFAULT_ERROR_MESSAGE, style="bold red"))
