from typing import Dict, Optional

import typer

# style name -> click/typer style arguments
STYLES: Dict[str, Dict[str, object]] = {
    "title": {"fg": typer.colors.CYAN, "bold": True},
    "info": {"fg": typer.colors.BRIGHT_BLACK},
    "prompt": {"fg": typer.colors.GREEN, "bold": True},
    "assistant": {"fg": typer.colors.WHITE},
    "success": {"fg": typer.colors.GREEN},
    "warning": {"fg": typer.colors.YELLOW},
    "error": {"fg": typer.colors.RED, "bold": True},
}


def stylize(text: str, style: Optional[str] = None) -> str:
    """Return `text` wrapped in the ANSI codes for `style`. Unknown or empty style -> plain text."""
    if not style or style not in STYLES:
        return text
    return typer.style(text, **STYLES[style])


class TerminalConsole:
    """Line based console on stdin/stdout."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return input(stylize(prompt, "prompt"))
        except EOFError:
            return None

    def write_line(self, text: str = "", style: Optional[str] = None) -> None:
        typer.echo(stylize(text, style))
