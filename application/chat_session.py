from __future__ import annotations
from enum import Enum
from typing import Callable, List, Optional, Tuple, Type, TypeVar

from application.prompts import build_messages
from config.constant import EXIT_COMMANDS, MAX_OUTPUT_TOKENS_RANGE, TEMPERATURE_RANGE
from config.env import AppSettings
from config.logging import logger
from domain.models import ChatOptions, ChatResponse
from domain.ports import ChatClientPort, ConsolePort, ModelProviderPort, SecretResolverPort
from infra.factories.provider_factory import create_provider
from infra.providers.base import ProviderConfig, ProviderNotConfiguredError

ProviderFactory = Callable[[str, ProviderConfig, SecretResolverPort], ModelProviderPort]
N = TypeVar("N", int, float)


class SessionState(str, Enum):
    SELECTING_PROVIDER = "selecting_provider"
    CONFIGURING_OPTIONS = "configuring_options"
    LOOPING = "looping"
    TERMINATED = "terminated"


def is_exit_command(line: Optional[str]) -> bool:
    """End of input, blank lines and exit/quit all end the conversation."""
    if line is None:
        return True
    text = line.strip()
    return not text or text.lower() in EXIT_COMMANDS


class ChatSession:
    """
    Console chat: provider menu -> chat options -> question/answer loop.
    Configuration errors (ProviderConfigError) are raised to the caller before the loop starts;
    errors from a single chat turn are reported and the loop continues.
    """
    def __init__(
        self,
        *,
        settings: AppSettings,
        console: ConsolePort,
        secrets: SecretResolverPort,
        provider_factory: ProviderFactory = create_provider,
    ):
        self.settings = settings
        self.console = console
        self.secrets = secrets
        self.provider_factory = provider_factory

        self.state = SessionState.SELECTING_PROVIDER
        self.provider: Optional[ModelProviderPort] = None
        self.client: Optional[ChatClientPort] = None
        self.options: Optional[ChatOptions] = None

    # ============== Provider selection ==============
    def select_provider(self, preselected: Optional[str] = None) -> Tuple[str, ProviderConfig]:
        name = preselected if preselected else self._prompt_provider()
        found = self.settings.find_provider(name)
        if found is None:
            logger.error(f"[chat] Provider '{name}' not found in configuration")
            raise ProviderNotConfiguredError(name)

        self.state = SessionState.CONFIGURING_OPTIONS
        return found

    def _prompt_provider(self) -> str:
        names: List[str] = list(self.settings.providers)
        default = self.settings.selected_provider

        self.console.write_line("Available providers:", "title")
        for i, name in enumerate(names, start=1):
            marker = " (default)" if name.lower() == default.lower() else ""
            self.console.write_line(f"  {i}. {name}{marker}")

        raw = self.console.read_line(f"Select a provider [1-{len(names)}] or press Enter for {default}: ")
        choice = (raw or "").strip()
        if not choice:
            return default
        if choice.isdigit() and 1 <= int(choice) <= len(names):
            return names[int(choice) - 1]

        self.console.write_line(f"Invalid selection '{choice}', using default provider '{default}'.", "warning")
        logger.warning(f"[chat] Invalid provider selection '{choice}', falling back to '{default}'")
        return default

    def connect(self, name: str, cfg: ProviderConfig) -> ModelProviderPort:
        self.provider = self.provider_factory(name, cfg, self.secrets)
        self.console.write_line(f"Using {self.provider.provider_name} ({self.provider.model_name})", "success")
        return self.provider

    # ============== Chat options ==============
    def configure_options(self, use_defaults: bool = False) -> ChatOptions:
        defaults = self.settings.chat_options.to_options()
        self.console.write_line(
            f"Default chat options: max output tokens = {defaults.max_output_tokens}, "
            f"temperature = {defaults.temperature}",
            "info",
        )

        options = defaults
        if not use_defaults:
            answer = self.console.read_line("Customize chat options? (y/N): ")
            if (answer or "").strip().lower() in {"y", "yes"}:
                options = ChatOptions(
                    max_output_tokens=self._read_number(
                        "Max output tokens", int, MAX_OUTPUT_TOKENS_RANGE, defaults.max_output_tokens
                    ),
                    temperature=self._read_number(
                        "Temperature", float, TEMPERATURE_RANGE, defaults.temperature
                    ),
                )

        self.options = options
        logger.info(f"[chat] Chat options: {options}")
        return options

    def _read_number(self, label: str, parse: Type[N], bounds: Tuple[N, N], default: N) -> N:
        low, high = bounds
        raw = self.console.read_line(f"{label} [{low}-{high}] (default {default}): ")
        try:
            value = parse((raw or "").strip())
        except ValueError:
            value = None

        # empty input is treated like invalid input
        if value is None or not low <= value <= high:
            self.console.write_line(f"Invalid {label.lower()} '{raw or ''}', using default {default}.", "warning")
            return default
        return value

    # ============== Conversation ==============
    def ask(self, question: str) -> Optional[ChatResponse]:
        """One turn. Returns None when the request failed (already reported to the user)."""
        messages = build_messages(question)
        try:
            response = self.client.get_response(messages, self.options)
        except Exception as e:
            logger.exception(f"[chat] Chat request failed: {e}")
            self.console.write_line(f"Error: {e}", "error")
            return None

        self.console.write_line(f"AI: {response.text}", "assistant")
        return response

    def loop(self) -> None:
        self.state = SessionState.LOOPING
        self.console.write_line("Type your question, or 'exit' to quit.", "info")
        while True:
            line = self.console.read_line("You: ")
            if is_exit_command(line):
                break
            self.ask(line.strip())
        self.terminate()

    def terminate(self) -> None:
        self.state = SessionState.TERMINATED
        self.console.write_line(self.settings.ui.exit_message, "title")

    # ============== Entry points ==============
    def _welcome(self) -> None:
        if self.settings.ui.welcome_title:
            self.console.write_line(self.settings.ui.welcome_title, "title")

    def _setup(self, provider: Optional[str], use_defaults: bool) -> None:
        name, cfg = self.select_provider(provider)
        self.connect(name, cfg)
        self.configure_options(use_defaults=use_defaults)
        self.client = self.provider.create_chat_client()

    def run(self, provider: Optional[str] = None, use_defaults: bool = False) -> int:
        self._welcome()
        self._setup(provider, use_defaults)
        self.loop()
        return 0

    def run_once(self, question: str, provider: Optional[str] = None) -> int:
        """Ask a single question with the default options; 1 when the request fails."""
        self._setup(provider or self.settings.selected_provider, use_defaults=True)
        response = self.ask(question)
        self.state = SessionState.TERMINATED
        return 0 if response is not None else 1
