[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamlstream"
version = "0.0.6"
description = "Character input sources for a YAML 1.2 scanner, plus tools to generate and benchmark large YAML files"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["yaml", "scanner", "input", "benchmark", "generator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yamlstream-gen-large = "yamlstream.gen_large:main"
yamlstream-bench-compare = "yamlstream.bench_compare:main"

[tool.hatch.build.targets.wheel]
packages = ["yamlstream"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
