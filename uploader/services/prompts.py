from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from uploader.domain.errors import ProjectError
from uploader.domain.models import ConfigBuilder, DeployConfig
from uploader.services.url_normalization import UrlNormalizer

# (field, question, secret) in the order they are asked
PROMPTS = (
    ("directory", "SET THE DIRECTORY:", False),
    ("build_command", "SET THE BUILD COMMAND:", False),
    ("domain", "SET THE DOMAIN", False),
    ("auth", "AUTHENTICATION KEY", True),
)


@dataclass
class ConfigPrompter:
    """
    Interactive configure phase: blocking reads, repeat until a value is available.
    """
    url_normalizer: UrlNormalizer
    input_fn: Callable[[], str] = input
    print_fn: Callable[[str], None] = print

    def ask(self, question: str, default: Optional[str] = None, *, secret: bool = False) -> str:
        while True:
            self.print_fn(question)
            if default:
                self.print_fn("\tdefault: " + ("(keep current)" if secret else default))
            try:
                answer = (self.input_fn() or "").strip()
            except EOFError as e:
                raise ProjectError(f"Input closed while waiting for: {question}") from e
            if answer:
                return answer
            if default:
                return default

    def resolve(self, existing: Optional[DeployConfig], *, reconfigure: bool = False) -> DeployConfig:
        """
        First run (no saved config) or reconfigure: ask every field, offering the current value.
        Otherwise ask only the fields that are still unset.
        """
        ask_all = existing is None or reconfigure
        builder = ConfigBuilder.from_config(existing if existing is not None else DeployConfig.defaults())

        for name, question, secret in PROMPTS:
            current = getattr(builder, name)
            if ask_all or not current:
                builder.set(name, self.ask(question, current, secret=secret))

        if builder.domain:
            builder.set("domain", self.url_normalizer.normalize(builder.domain))

        return builder.build()
