[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wsikit"
version = "0.1.0"
description = "Window-system integration helpers: DRM fourcc format tables, buffer allocation planning, present-mode compatibility and small concurrency utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["wsi", "drm", "fourcc", "swapchain", "present-mode", "semaphore", "ring-buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wsikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
