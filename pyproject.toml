[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ixcipher"
version = "0.1.0"
description = "Layered encryption toolkit: CBC, CTR, cascade and GCM modes, PKCS7 padding, cipher multiplexing, ChaCha20-Poly1305 and tamper-evident audit logging"
requires-python = ">=3.10"
keywords = ["encryption", "cbc", "ctr", "gcm", "chacha20", "pkcs7", "audit-log", "entropy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ixcipher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
