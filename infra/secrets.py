import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import dotenv_values

from domain.ports import SecretResolverPort


def candidate_names(key: str) -> List[str]:
    """
    Environment variable names tried for a configuration key.
    "GitHub:Token" -> GitHub:Token, GitHub__Token, GITHUB__TOKEN, GITHUB_TOKEN
    """
    nested = key.replace(":", "__")
    names = [key, nested, nested.upper(), key.replace(":", "_").upper()]
    # keep order, drop duplicates
    return list(dict.fromkeys(names))


class EnvSecretResolver(SecretResolverPort):
    """Resolve secrets from the process environment first, then from a .env file."""

    def __init__(self, env_file: Optional[str] = ".env", environ: Optional[Dict[str, str]] = None):
        self._environ = os.environ if environ is None else environ
        self._file_values: Dict[str, Optional[str]] = {}
        if env_file and Path(env_file).is_file():
            self._file_values = dotenv_values(env_file)

    def get(self, key: str) -> Optional[str]:
        if not key:
            return None
        for source in (self._environ, self._file_values):
            for name in candidate_names(key):
                value = source.get(name)
                if value:
                    return value
        return None
