[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minirt"
version = "0.1.0"
description = "Scene-file reader, ray intersection and Phong shading for a small ray tracer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "3d", "scene", "phong"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minirt = "minirt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minirt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
