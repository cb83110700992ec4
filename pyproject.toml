[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rappy"
version = "1.0.0"
description = "Building blocks for small Raspberry Pi robot programs: a tiny expression language, durations, colours, gamepad input and input-to-output connections."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "raspberry-pi",
    "robotics",
    "gamepad",
    "joystick",
    "expression-language",
    "embedded",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rappy-script = "rappy.scrpt:main"

[tool.hatch.build.targets.wheel]
packages = ["rappy"]

[tool.pytest.ini_options]
addopts = "-ra"
