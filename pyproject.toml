[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storefront"
version = "0.1.0"
description = "A small online store: product catalogue, cart, coupons, orders and reviews, with a console customer menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["store", "shop", "cart", "coupon", "orders", "inventory", "point-of-sale"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
storefront = "storefront.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["storefront"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
