from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

from zerosetup.spec import ProcessError, ProcessResult

Handler = Callable[[Optional[Path]], ProcessResult]
Response = Union[ProcessResult, ProcessError, Handler]


@dataclass
class Call:
    command: str
    args: List[str]
    cwd: Optional[Path]

    @property
    def cmdline(self) -> str:
        return " ".join([self.command, *self.args])


class FakeProcessRunner:
    """
    Records invocations and answers them from prefix-matched responses.
    Unmatched commands succeed with empty output.
    """

    def __init__(self):
        self.calls: List[Call] = []
        self._responses: List[Tuple[str, Response]] = []

    def respond(self, prefix: str, stdout: str = "", stderr: str = "") -> "FakeProcessRunner":
        self._responses.append((prefix, ProcessResult(stdout=stdout, stderr=stderr)))
        return self

    def fail(self, prefix: str, exit_code: int = 1, stderr: str = "boom") -> "FakeProcessRunner":
        command, *args = prefix.split()
        self._responses.append(
            (prefix, ProcessError(command, args, exit_code=exit_code, stderr=stderr))
        )
        return self

    def on(self, prefix: str, handler: Handler) -> "FakeProcessRunner":
        self._responses.append((prefix, handler))
        return self

    def run(
        self, command: str, args: Sequence[str], cwd: Optional[Path] = None
    ) -> ProcessResult:
        call = Call(command, list(args), cwd)
        self.calls.append(call)

        # Later registrations win.
        for prefix, response in reversed(self._responses):
            if call.cmdline.startswith(prefix):
                if isinstance(response, ProcessError):
                    raise response
                if isinstance(response, ProcessResult):
                    return response
                return response(cwd)
        return ProcessResult()

    def cmdlines(self) -> List[str]:
        return [call.cmdline for call in self.calls]

    def called(self, prefix: str) -> bool:
        return any(line.startswith(prefix) for line in self.cmdlines())
