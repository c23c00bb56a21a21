[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stegframe"
version = "1.0.0"
description = "Building blocks for steganography tools: bit-level message packing, media containers, PCM WAVE headers, XML configuration and plug-in interfaces."
requires-python = ">=3.10"
keywords = ["steganography", "wave", "pcm", "bit packing", "plug-ins", "configuration"]
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
    "Topic :: Security",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["stegframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
