# main.py
from typing import Optional

import typer

from application.chat_session import ChatSession
from config.constant import APP_TITLE
from config.env import load_settings
from config.logging import logger
from infra.providers.base import ProviderConfigError
from infra.secrets import EnvSecretResolver
from utils.console import TerminalConsole, stylize

app = typer.Typer(
    name="simple-chat",
    help=f"{APP_TITLE}: chat with GitHub Models, Azure OpenAI, OpenAI or a local model from the console.",
    add_completion=False,
)


@app.command()
def chat(
    settings_file: Optional[str] = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to the settings JSON (default: appsettings.json or $SIMPLECHAT_SETTINGS_FILE)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="Provider name from the settings file; skips the provider menu",
    ),
    use_defaults: bool = typer.Option(
        False,
        "--defaults",
        help="Use the configured chat options without asking",
    ),
    question: Optional[str] = typer.Option(
        None,
        "--question",
        "-q",
        help="Ask a single question and exit",
    ),
    env_file: str = typer.Option(
        ".env",
        "--env-file",
        help="dotenv file searched for provider tokens",
    ),
) -> None:
    """Start an interactive chat session."""
    console = TerminalConsole()
    try:
        settings = load_settings(settings_file)
        session = ChatSession(
            settings=settings,
            console=console,
            secrets=EnvSecretResolver(env_file=env_file),
        )
        if question is not None:
            code = session.run_once(question, provider=provider)
        else:
            code = session.run(provider=provider, use_defaults=use_defaults)
    except ProviderConfigError as e:
        logger.error(f"[main] Configuration error: {e}")
        typer.echo(stylize(str(e), "error"), err=True)
        raise typer.Exit(1)

    raise typer.Exit(code)


if __name__ == "__main__":
    app()
