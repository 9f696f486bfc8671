[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytegrab"
version = "0.1.0"
description = "Game logic for a chat-server bot where members grab bytes, with cooldowns, leaderboards and a byte master role"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "bot", "game", "leaderboard", "sqlite", "cooldown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Games/Entertainment",
    "Framework :: AsyncIO",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["bytegrab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
