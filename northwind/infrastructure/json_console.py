"""JSON Console — render a JSON document on the terminal under a title.

Invariants:
    - Output is a blank line, the title, then the highlighted JSON; nothing is returned
    - The JSON text is shown as given; invalid JSON raises json.JSONDecodeError

Design Decisions:
    - rich over hand-rolled ANSI: it handles colour, terminal detection and
      indentation; a Console can be injected (record=True in tests)
    - Title markup is escaped so names like "[draft]" print literally
"""

from rich.console import Console
from rich.json import JSON
from rich.markup import escape

TITLE_STYLE: str = "cyan underline"


def display_json_console(
    json_text: str, title: str, console: Console | None = None,
) -> None:
    """Print json_text with syntax highlighting beneath title."""
    console = console or Console()
    console.print()
    console.print(f"[{TITLE_STYLE}]{escape(title)}[/]")
    console.print(JSON(json_text, indent=2))
