[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jpegdecode"
version = "0.1.0"
description = "Baseline JPEG decoder that writes PPM and PGM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["jpeg", "decoder", "ppm", "pgm", "huffman", "idct", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jpeg2ppm = "jpegdecode.cli:main"
jpeg2ppm-benchmark = "jpegdecode.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["jpegdecode"]

[tool.pytest.ini_options]
addopts = "-ra"
