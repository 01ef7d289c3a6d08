import os
import tempfile
from types import SimpleNamespace

import pytest

# Keep test runs from writing tmp/log.txt into the working tree
os.environ.setdefault("SIMPLECHAT_LOG_FILE", os.path.join(tempfile.gettempdir(), "simple-chat-tests.log"))

from config.env import AppSettings, ChatOptionsSettings, UiSettings  # noqa: E402
from domain.models import ChatResponse  # noqa: E402
from infra.providers.base import ProviderConfig  # noqa: E402


class FakeConsole:
    """Scripted console: returns queued inputs, None once they run out."""

    def __init__(self, inputs=None):
        self.inputs = list(inputs or [])
        self.prompts = []
        self.lines = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.inputs:
            return None
        return self.inputs.pop(0)

    def write_line(self, text="", style=None):
        self.lines.append((text, style))

    def texts(self, style=None):
        return [t for t, s in self.lines if style is None or s == style]


class DictSecrets:
    def __init__(self, values=None):
        self.values = dict(values or {})
        self.requested = []

    def get(self, key):
        self.requested.append(key)
        return self.values.get(key)


class RecordingChatClient:
    """Chat client that records each request; entries in `failures` raise on that call index."""

    def __init__(self, failures=None):
        self.calls = []
        self.failures = dict(failures or {})

    def get_response(self, messages, options):
        index = len(self.calls)
        self.calls.append((list(messages), options))
        if index in self.failures:
            raise self.failures[index]
        return ChatResponse(text=f"answer {index + 1}")


class FakeProvider:
    def __init__(self, client, name="Fake", model="fake-model"):
        self.client = client
        self.provider_name = name
        self.model_name = model
        self.created = 0

    def create_chat_client(self):
        self.created += 1
        return self.client


class FakeCompletions:
    def __init__(self, reply="hello from the model", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_sdk():
    """Stand-in for openai.OpenAI / openai.AzureOpenAI that records constructor kwargs."""

    class FakeSDK:
        instances = []
        reply = "hello from the model"
        error = None
        init_error = None

        def __init__(self, **kwargs):
            if FakeSDK.init_error is not None:
                raise FakeSDK.init_error
            self.kwargs = kwargs
            self.completions = FakeCompletions(reply=FakeSDK.reply, error=FakeSDK.error)
            self.chat = SimpleNamespace(completions=self.completions)
            FakeSDK.instances.append(self)

    return FakeSDK


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def settings():
    return AppSettings(
        selected_provider="GitHub",
        providers={
            "GitHub": ProviderConfig(
                endpoint_url="https://models.github.ai/inference",
                model_name="mistral-ai/Ministral-3B",
                token_config_key="GitHub:Token",
            ),
            "Local": ProviderConfig(
                endpoint_url="http://localhost:11434/v1",
                model_name="llama3.2",
            ),
        },
        chat_options=ChatOptionsSettings(max_output_tokens=300, temperature=0.2),
        ui=UiSettings(welcome_title="Welcome", exit_message="Bye!"),
    )
