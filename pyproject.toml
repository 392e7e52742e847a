[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adplatform"
version = "1.1.0"
description = "Advertising platform toolkit: profanity moderation, API endpoint catalogue and a Telegram bot for advertisers"
requires-python = ">=3.10"
keywords = [
    "advertising",
    "moderation",
    "profanity",
    "openapi",
    "telegram",
    "bot",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
adplatform-bot = "adplatform.bot.dispatcher:main"

[tool.hatch.build.targets.wheel]
packages = ["adplatform"]

[tool.hatch.build.targets.sdist]
include = ["adplatform", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
