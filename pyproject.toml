[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdascope"
version = "0.1.0"
description = "Derive, catalogue and report on Solana program derived addresses"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "solana",
    "pda",
    "program derived address",
    "base58",
    "ed25519",
    "seeds",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pda-examples = "pdascope.runner:main"
pda-display-demo = "pdascope.display:demo_main"

[tool.hatch.build.targets.wheel]
packages = ["pdascope"]

[tool.hatch.build.targets.sdist]
include = ["pdascope", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
