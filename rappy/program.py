"""Base class for command line programs that initialise once and then loop."""

from __future__ import annotations

import signal
import sys
from abc import ABC, abstractmethod
from typing import Any, Sequence

from rappy.argparser import ArgumentParser
from rappy.log import Logger, LogLevel
from rappy.log import logger as default_logger


class Program(ABC):
    """Parses arguments, calls :meth:`init` and then :meth:`loop` until stopped."""

    def __init__(self, name: str, logger: Logger | None = None) -> None:
        self.prgm_name = name
        self.logger = logger if logger is not None else default_logger
        self.parser = ArgumentParser(name)
        self.examples: list[str] = []
        self.running = True
        self._log_level = int(self.logger.level)
        self._help = False
        self._started = False

    def _set_help(self, _value: bool) -> None:
        self._help = True

    def _set_log_level(self, value: int) -> None:
        self._log_level = value

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the program on the arguments after the program name; return the exit code."""
        args = list(sys.argv[1:] if argv is None else argv)
        try:
            if self._started:
                raise RuntimeError("Program.run(): A program can only be run once")
            self._started = True

            # These go after all other arguments.
            self.parser.add_optional(self._set_help, "help", "Displays the help information", bool)
            self.parser.add_optional(self._set_log_level, "log-level", "The verbosity of the logs.", int)

            self.parser.parse(args)
            self.logger.level = LogLevel(self._log_level)
            self.init()
        except Exception as error:
            if not self._help and args:
                self.logger.error(f"Initialization error:\n\n    {error}\n")
            self.help()
            return 1

        if self._help:
            self.help()
            return 0

        try:
            previous = signal.signal(signal.SIGINT, self.handler)
        except ValueError:
            previous = None

        try:
            while self.running:
                self.loop()
        except Exception as error:
            self.logger.error(error)
            return 1
        finally:
            if previous is not None:
                signal.signal(signal.SIGINT, previous)

        return 0

    def help(self) -> None:
        """Log the usage description and the examples."""
        try:
            message = self.parser.description()
            if self.examples:
                message += "\n\nexample usage:"
                for example in self.examples:
                    message += f"\n{example}"
            self.logger.info(message)
        except Exception as error:
            self.logger.error(f"Program.help(): Failed to generate help message: {error}")

    def handler(self, signum: int, frame: Any) -> None:
        """Stop the loop; installed for SIGINT while running."""
        self.logger.info(" Exiting...")
        self.running = False

    @abstractmethod
    def init(self) -> None:
        """Prepare the program after the arguments are parsed."""

    @abstractmethod
    def loop(self) -> None:
        """One iteration of the main loop."""