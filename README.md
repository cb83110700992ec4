# rappy

Building blocks for small Raspberry Pi robot programs: reading a gamepad,
describing timings and colours, parsing command lines, and connecting
inputs to outputs through small arithmetic scripts.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The script language

A script is a function of up to three arguments, written as
`(args){expression}`. The expression may use numbers, the argument names,
parentheses and the operators `+ - * / ^`. `^` binds tighter than `*` and
`/`, which bind tighter than `+` and `-`; among operators of the same
priority the leftmost binds first. Whitespace is ignored.

```python
from rappy.script import parse

f = parse("(a, b){a + b * 2}", 2)
print(f(1.0, 2.0))  # 5.0
```

The second argument of `parse` is the number of arguments the function
takes (0 to 3). A malformed script raises `rappy.script.ScriptError`, a
subclass of `ValueError`. The syntax tree classes live in `rappy.nodes`.

From the shell, the `rappy-script` command takes a script followed by the
numbers to call it with, and prints the result:

```
rappy-script "(a,b){a+b}" 1 2
rappy-script "(){2^10}"
```

At most three numbers are accepted. The command exits with status 1 and
an error message on bad input.

## Durations, timers and colours

```python
from rappy.duration import Duration
from rappy.color import Color

period = Duration.from_string("10ms")   # "ns", "us", "ms", "s" or a bare number of seconds
print(float(period))                    # 0.01
print(period.milliseconds())            # 10

red = Color.from_string("red")          # red, yellow, green, cyan, blue, magenta, black, white
half = red * 0.5
print(Color.from_hsv(120.0, 1.0, 1.0))  # {0, 1, 0}
```

`Duration` holds whole nanoseconds (`Duration.ns`) and can also be built
with `from_seconds` and `from_nanoseconds`. `rappy.timer.Timer` is a
stopwatch with `start`, `reset`, `stop`, `running` and `elapsed`, the last
returning a `Duration`.

## Command-line programs

`rappy.argparser.ArgumentParser` handles positional arguments and
required or optional `--tag` arguments. Typed arguments convert their
value (`int`, `float`, `str`, `Duration`, `Color`, a `list` of integers,
or a `bool` flag) and hand it to a setter; `*_func` variants take a
function that consumes values from a queue of remaining arguments.
`description()` builds a usage text.

`rappy.program.Program` wraps the parser into a program life cycle:
subclass it, register arguments and `examples` in the constructor,
implement `init` and `loop`, and call `run`, which returns an exit code.
`--help` and `--log-level` are added for you, and Ctrl-C stops the loop.

## Gamepads and connections

`rappy.gamepad.Controller` decodes 8-byte joystick events from a Linux
`/dev/input/<id>` device (or from any object with a `read()` method
returning bytes, passed as `source`) into a
`rappy.controller_state.ControllerState`. Call `poll()` to apply waiting
events. `get_producer(key)` returns a callable giving a float for binds
such as `x`, `circle`, `lb`, `lt`, `ljoy.y`, `rjoy.left` or `dpad.up`.

`rappy.endpoints` defines the `Input` and `Output` base classes.
`rappy.connection.parse_connection` takes a connection description such as

```json
{"a": "pad.ljoy.y", "b": "pad.rt", "function": "a*b", "output": "motor.speed"}
```

with mappings of named inputs and outputs, and returns a callable that
reads the inputs, applies the function and passes the result to the
output's consumer. Without a `function`, a single input is passed
straight through.

## Other helpers

- `rappy.log.Logger` with levels from `LogLevel.TRACE` to `LogLevel.FATAL`
- `rappy.terminal` for ANSI cursor movement and screen clearing
- `rappy.files.read_file` for reading a whole text file
- `rappy.jsonhelper` for typed lookups in parsed JSON configuration
- `rappy.pinconfig` for pin modes and board-pin to GPIO numbering
- `rappy.socket_io.Socket` for poll-driven reads and writes on a descriptor
- `rappy.process.Process` for running a command with piped standard streams

## What is not included

The package does not drive hardware. `rappy.pinconfig` only describes pin
modes and numbering; there is no GPIO, PWM, servo or I2C access, and no
ready-made outputs for lights or motors. `Output` must be subclassed to
act on anything. There is also no command that loads a JSON configuration
and runs inputs, connections and outputs in a loop; `rappy-script` is the
only command.