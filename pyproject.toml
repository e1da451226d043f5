[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toylex"
version = "0.1.0"
description = "Four small lexers for a toy C-like language: regex-driven, hand-written, pattern-table and scanner based"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "scanner", "compiler", "regex"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toylex-regex = "toylex.regex_lexer:main"
toylex-simple = "toylex.simple_lexer:main"
toylex-pattern = "toylex.pattern_lexer:main"
toylex-scan = "toylex.scanner:main"

[tool.hatch.build.targets.wheel]
packages = ["toylex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
