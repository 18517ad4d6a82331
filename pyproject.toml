[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moebot"
version = "0.1.0"
description = "Core logic for a community chat bot: permissions, role groups, veteran points, timers, spoiler GIFs and message formatting."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["chat", "bot", "discord", "roles", "permissions", "moderation", "timer", "gif"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["moebot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
