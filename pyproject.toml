[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "instabot"
version = "0.1.0"
description = "Client for the Instagram Messaging API: send messages, manage ice breakers, fetch user profiles and parse webhook events."
requires-python = ">=3.10"
dependencies = [
    "requests>=2.25",
]
keywords = [
    "instagram",
    "messaging",
    "chatbot",
    "webhook",
    "graph-api",
    "ice-breakers",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["instabot"]

[tool.hatch.build.targets.sdist]
include = [
    "instabot",
    "tests",
    "pyproject.toml",
]

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
