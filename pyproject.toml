[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "afterburn"
version = "1.0.0"
description = "A side-scrolling space shooter with collectible weapons, enemy waves and a high score table"
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "side-scroller", "pygame", "ico"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
afterburn = "afterburn.screens:main"
afterburn-icon = "afterburn.icontool:main"

[tool.hatch.build.targets.wheel]
packages = ["afterburn"]

[tool.pytest.ini_options]
addopts = "-ra"
