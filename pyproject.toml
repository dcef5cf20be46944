[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trycart"
version = "0.1.0"
description = "Shopping cart with product discounts, promotions and an in-memory cart repository"
requires-python = ">=3.10"
dependencies = []
keywords = ["shopping-cart", "discount", "promotion", "point-of-sale", "decimal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trycart-demo = "trycart.demos:main"
trycart-sort = "trycart.demos:sort_main"
trycart-concurrent-map = "trycart.demos:concurrent_map_main"

[tool.hatch.build.targets.wheel]
packages = ["trycart"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
