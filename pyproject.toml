[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexinfo"
version = "0.1.0"
description = "Full-screen terminal system information dashboard drawn over a hex-dump backdrop"
requires-python = ">=3.10"
keywords = ["system information", "dashboard", "terminal", "curses", "monitoring", "hexdump"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexinfo = "hexinfo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hexinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
