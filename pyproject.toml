[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nftsale"
version = "0.20.0"
description = "Fixed-price NFT sale, NFT receiver and non-transferable collection contract logic over an in-memory store"
requires-python = ">=3.10"
dependencies = []
keywords = ["nft", "cw721", "cw20", "smart-contract", "fixed-price", "sale"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nftsale"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
