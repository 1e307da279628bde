[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cloudmaid"
version = "0.1.0"
description = "Render CloudFormation templates as Mermaid flowcharts of Lambda, SQS and API Gateway resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["cloudformation", "mermaid", "diagram", "aws", "flowchart"]
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
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cloudmaid = "cloudmaid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cloudmaid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
