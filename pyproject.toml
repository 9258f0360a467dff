[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swapcheck"
version = "0.1.0"
description = "Checker, step-by-step viewer and input generator for two-stack push_swap instruction lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["push_swap", "checker", "stack", "sorting", "radix", "visualizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swapcheck = "swapcheck.checker:main"
swapcheck-step = "swapcheck.stepper:main_bonus"
swapcheck-radix-step = "swapcheck.stepper:main_radix"
swapcheck-gen = "swapcheck.generate:main_raw"
swapcheck-gen-ranked = "swapcheck.generate:main_ranked"
swapcheck-radix-demo = "swapcheck.radix_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["swapcheck"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
