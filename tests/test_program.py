import io
import signal

from rappy.log import Logger, LogLevel
from rappy.program import Program


class Counter(Program):
    def __init__(self, logger, fail_init=False, fail_loop=False):
        super().__init__("counter", logger)
        self.fail_init = fail_init
        self.fail_loop = fail_loop
        self.limit = 1
        self.loops = 0
        self.inited = False
        self.parser.add_optional(self._set_limit, "count", "Number of loops", int)
        self.examples.append("counter --count 3")

    def _set_limit(self, value):
        self.limit = value

    def init(self):
        self.inited = True
        if self.fail_init:
            raise ValueError("bad config")

    def loop(self):
        if self.fail_loop:
            raise RuntimeError("broken loop")
        self.loops += 1
        if self.loops >= self.limit:
            self.running = False


def _logger():
    out, err = io.StringIO(), io.StringIO()
    return Logger(out, err), out, err


def test_runs_loop_until_stopped():
    log, _, _ = _logger()
    program = Counter(log)
    assert program.run(["--count", "3"]) == 0
    assert program.inited is True
    assert program.loops == 3


def test_help_prints_usage_and_skips_loop():
    log, out, _ = _logger()
    program = Counter(log)
    assert program.run(["--help"]) == 0
    assert program.loops == 0
    text = out.getvalue()
    assert text.startswith("counter [--count #] [--help] [--log-level #]")
    assert "example usage:\ncounter --count 3" in text
    assert "help: Displays the help information" in text


def test_init_failure_reports_and_prints_help():
    log, out, err = _logger()
    program = Counter(log, fail_init=True)
    assert program.run(["--count", "2"]) == 1
    assert program.loops == 0
    assert "Initialization error:\n\n    bad config\n" in err.getvalue()
    assert "counter [--count #]" in out.getvalue()


def test_init_failure_without_arguments_is_quiet():
    log, out, err = _logger()
    program = Counter(log, fail_init=True)
    assert program.run([]) == 1
    assert err.getvalue() == ""
    assert "counter [--count #]" in out.getvalue()


def test_unrecognized_argument_fails():
    log, _, err = _logger()
    program = Counter(log)
    assert program.run(["--bogus"]) == 1
    assert "Unrecognized argument: --bogus" in err.getvalue()
    assert program.inited is False


def test_loop_failure_returns_one():
    log, _, err = _logger()
    program = Counter(log, fail_loop=True)
    assert program.run([]) == 1
    assert err.getvalue() == "broken loop\n"


def test_log_level_argument_sets_logger_level():
    log, out, _ = _logger()
    program = Counter(log)
    assert program.run(["--log-level", "4"]) == 0
    assert log.level == LogLevel.ERROR
    program.help()
    assert out.getvalue() == ""


def test_invalid_log_level_fails():
    log, _, err = _logger()
    program = Counter(log)
    assert program.run(["--log-level", "9"]) == 1
    assert "Initialization error" in err.getvalue()


def test_handler_stops_running():
    log, out, _ = _logger()
    program = Counter(log)
    program.handler(signal.SIGINT, None)
    assert program.running is False
    assert "Exiting..." in out.getvalue()


def test_second_run_fails():
    log, _, _ = _logger()
    program = Counter(log)
    assert program.run([]) == 0
    assert program.run([]) == 1
    assert program.loops == 1


def test_sigint_handler_restored_after_run():
    log, _, _ = _logger()
    before = signal.getsignal(signal.SIGINT)
    program = Counter(log)
    assert program.run([]) == 0
    assert signal.getsignal(signal.SIGINT) == before