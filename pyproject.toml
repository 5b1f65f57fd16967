[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "burbir"
version = "0.1.0"
description = "Core of a small console micro-blogging app: tweets, reply trees, drafts and text-art profile pictures"
requires-python = ">=3.10"
dependencies = []
keywords = ["microblog", "chat", "tweets", "drafts", "replies", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["burbir"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
