"""In-memory fakes for the git collaborator and interactive prompts."""

from typing import List, Optional, Sequence

from git_user.errors import PromptCancelled
from git_user.git import ConfigValue

# Queue this in a FakePrompter to simulate Ctrl-C at that prompt
CANCEL = object()


class FakeGit:
    """Fake git collaborator.

    State Management:
    - version_code: exit code returned by the installed probe
    - in_repository: result of the repository probe
    - config: attr -> value of the effective git config

    Mutation Tracking:
    - set_calls: list of (attr, value) passed to set_config
    """

    def __init__(
        self,
        *,
        version_code: int = 0,
        in_repository: bool = True,
        config: Optional[dict] = None,
        failing_attrs: Sequence[str] = (),
    ) -> None:
        self.version_code = version_code
        self.in_repository = in_repository
        self.config = dict(config or {})
        self.failing_attrs = set(failing_attrs)
        self.set_calls: List[tuple[str, str]] = []

    def version_check(self) -> int:
        return self.version_code

    def is_repository(self) -> bool:
        return self.in_repository

    def get_config(self, attr: str) -> ConfigValue:
        if attr in self.config:
            return ConfigValue(value=self.config[attr], is_set=True)
        return ConfigValue(value="", is_set=False)

    def set_config(self, attr: str, value: str) -> bool:
        self.set_calls.append((attr, value))
        if attr in self.failing_attrs:
            return False
        self.config[attr] = value
        return True


class FakePrompter:
    """Answers prompts from a queue and records what was asked.

    Select prompts take an int index, text prompts take a string.
    ``None`` as a text answer accepts the offered default.
    """

    def __init__(self, answers: Optional[list] = None) -> None:
        self.answers = list(answers or [])
        self.selects: List[tuple[str, list, int]] = []
        self.texts: List[tuple[str, Optional[str]]] = []

    def _next(self):
        if not self.answers:
            raise AssertionError("Unexpected prompt")
        answer = self.answers.pop(0)
        if answer is CANCEL:
            raise PromptCancelled()
        return answer

    def select(self, title: str, items: Sequence[str], default_index: int = 0) -> int:
        self.selects.append((title, list(items), default_index))
        return self._next()

    def text(self, title: str, default: Optional[str] = None) -> str:
        self.texts.append((title, default))
        answer = self._next()
        return default if answer is None else answer
