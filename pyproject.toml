[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricskit"
version = "0.1.0"
description = "Thread-safe counters and gauges with a registry and a periodic file dumper"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "counter", "gauge", "monitoring", "registry"]
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
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricskit-demo = "metricskit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["metricskit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
