[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolchat"
version = "0.1.0"
description = "Building blocks for chat clients that talk to OpenAI-compatible APIs and Model Context Protocol tool servers"
requires-python = ">=3.11"
keywords = ["mcp", "chat", "llm", "tools", "openai", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[tool.hatch.build.targets.wheel]
packages = ["toolchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
