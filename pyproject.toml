[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitoci"
version = "0.1.0"
description = "Configuration, OCI artifact types and command line for a Git remote helper that targets OCI registries."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["git", "oci", "registry", "remote-helper", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
git-remote-oci = "gitoci.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitoci"]

[tool.pytest.ini_options]
addopts = "-ra"
