from collections import deque
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from zerosetup.spec import CANCELLED, Answered, Cancelled, PromptOutcome
from zerosetup.spec.interaction import SelectOption


def _outcome(value: Any) -> PromptOutcome:
    return value if isinstance(value, Cancelled) else Answered(value)


class ScriptedPrompter:
    """
    Answers prompts from per-kind queues. An exhausted queue falls back to the
    prompt's default (confirm/select) or CANCELLED (text).
    """

    def __init__(
        self,
        confirm: Iterable[Any] = (),
        select: Iterable[Any] = (),
        text: Iterable[Any] = (),
    ):
        self._confirm = deque(confirm)
        self._select = deque(select)
        self._text = deque(text)
        self.questions: List[Tuple[str, str]] = []

    def confirm(self, message: str, default: bool = True) -> PromptOutcome[bool]:
        self.questions.append(("confirm", message))
        if self._confirm:
            return _outcome(self._confirm.popleft())
        return Answered(default)

    def select(
        self,
        message: str,
        options: Sequence[SelectOption],
        default: Optional[str] = None,
    ) -> PromptOutcome[str]:
        self.questions.append(("select", message))
        if self._select:
            return _outcome(self._select.popleft())
        return Answered(default if default is not None else options[0][0])

    def text(
        self,
        message: str,
        validator: Optional[Callable[[str], Optional[str]]] = None,
        placeholder: Optional[str] = None,
    ) -> PromptOutcome[str]:
        self.questions.append(("text", message))
        while self._text:
            value = self._text.popleft()
            if isinstance(value, Cancelled):
                return value
            if validator is None or validator(value) is None:
                return Answered(value)
        return CANCELLED

    def asked(self, kind: str) -> List[str]:
        return [message for k, message in self.questions if k == kind]
