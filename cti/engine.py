"""Line-oriented command console.

Protocol, one command per line::

    > Input lines are prompted with '> '. A line starting with '#' is a
    > comment and is ignored, as are blank lines.

    = Responses start with '=' (success) or '?' (failure), may span several
    ? lines, and end with the EOT control character followed by a newline.

Once a command line is accepted the engine writes EOT right after the
prompt so a client can tell a finished prompt from line noise.
"""

from __future__ import annotations

import logging
from typing import TextIO

from cti.commands.builtins import register_builtins
from cti.commands.command import Command
from cti.commands.exceptions import CommandFailure, CommandResult, ResultKind
from cti.commands.registry import DEFAULT_HELP, CommandRegistry, Handler
from cti.config import Settings
from cti.logging_config import LogOpenError, log_session

logger = logging.getLogger(__name__)

EOT = "\x04"
PROMPT = "> "
COMMENT_MARKER = "#"
SUCCESS_MARK = "="
FAILURE_MARK = "?"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Engine:
    """Reads commands, dispatches them and frames the responses.

    Subclasses add their own commands by registering bound methods after
    calling ``super().__init__()``::

        class CounterEngine(Engine):
            def __init__(self, settings=None):
                super().__init__(settings)
                self.count = 0
                self.register_command("incr", self.incr, "Increment the counter")

            def incr(self, command):
                check_num_arguments_equal(command, 0)
                self.count += 1
                command.write(self.count)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else Settings()
        self._registry = CommandRegistry()
        self._quit_flag = False
        register_builtins(self._registry, on_quit=self.request_quit)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def quit_requested(self) -> bool:
        return self._quit_flag

    def request_quit(self) -> None:
        self._quit_flag = True

    # Command management

    def is_registered(self, name: str) -> bool:
        return self._registry.is_registered(name)

    def register_command(self, name: str, handler: Handler, help: str = DEFAULT_HELP) -> None:
        self._registry.register(name, handler, help)

    def remove_command(self, name: str) -> bool:
        return self._registry.remove(name)

    # Session

    def main_loop(self, in_stream: TextIO, out_stream: TextIO) -> int:
        """Serve commands until ``quit``, a fatal handler error or end of input.

        Errors raised by the streams themselves propagate to the caller after
        the log session has been closed.
        """
        if self._quit_flag:
            # Nothing to serve, e.g. a help-only invocation.
            return EXIT_SUCCESS

        try:
            with log_session(self._settings):
                return self._serve(in_stream, out_stream)
        except LogOpenError as e:
            logger.error("%s", e)
            return EXIT_FAILURE

    def _serve(self, in_stream: TextIO, out_stream: TextIO) -> int:
        exit_code = EXIT_SUCCESS
        while not self._quit_flag:
            command = self.read_command(in_stream, out_stream)
            if command is None:
                logger.info("End of input")
                break
            if self.handle_command(command, out_stream).fatal:
                exit_code = EXIT_FAILURE
        return exit_code

    def read_command(self, in_stream: TextIO, out_stream: TextIO) -> Command | None:
        """Prompt until a command line arrives; ``None`` at end of input."""
        while True:
            out_stream.write(PROMPT)
            out_stream.flush()
            line = in_stream.readline()
            if not line:
                return None
            line = line.rstrip("\r\n")
            if line.strip() and not line.startswith(COMMENT_MARKER):
                break
        out_stream.write(EOT)
        out_stream.flush()
        return Command(line.strip())

    def invoke(self, command: Command) -> CommandResult:
        spec = self._registry.get(command.name)
        if spec is None:
            return CommandResult(ResultKind.UNKNOWN_COMMAND, f"unknown command: {command.name}")
        try:
            spec.handler(command)
        except CommandFailure as e:
            return CommandResult(ResultKind.FAILURE, e.message)
        except Exception as e:
            self.request_quit()
            return CommandResult(ResultKind.ERROR, str(e), error=e)
        return CommandResult(ResultKind.SUCCESS, command.response)

    def handle_command(self, command: Command, out_stream: TextIO) -> CommandResult:
        result = self.invoke(command)
        if result.success:
            logger.info("Accept command: %s", command.raw)
        else:
            logger.error("%s", result.text, exc_info=result.error)

        out_stream.write(format_response(result))
        out_stream.flush()
        return result


def format_response(result: CommandResult) -> str:
    text = result.text
    if not text.endswith("\n"):
        text += "\n"
    mark = SUCCESS_MARK if result.success else FAILURE_MARK
    return f"{mark} {text}{EOT}\n"
