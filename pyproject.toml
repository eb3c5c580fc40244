[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractol"
version = "0.1.0"
description = "Interactive Mandelbrot and Julia set explorer with progressive rendering and smooth colouring"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "visualization", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractol = "fractol.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractol"]

[tool.pytest.ini_options]
addopts = "-ra"
