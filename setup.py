#!/usr/bin/env python3
"""
Setup script for caption-e2e.

Install with `pip install -e .` for a development checkout, or
`pip install -e '.[dev]'` to add coverage and linting tools.
"""

import re
import sys
from pathlib import Path

if sys.version_info < (3, 11):
    sys.exit("Error: caption-e2e requires Python 3.11 or higher.")

try:
    from setuptools import setup
except ImportError:
    sys.exit("Error: setuptools is required. Install it with: pip install setuptools")

# Try to read version from __version__.py for consistency
try:
    version_file = Path(__file__).parent / "src" / "caption_e2e" / "__version__.py"
    version_content = version_file.read_text(encoding="utf-8")
    version_match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', version_content, re.M)
    version = version_match.group(1) if version_match else "0.1.0"
except OSError:
    version = "0.1.0"

# Read long description from README if available
readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")
    long_description_content_type = "text/markdown"
else:
    long_description = "End-to-end browser test suite for the caption generator"
    long_description_content_type = "text/plain"

# Core dependencies. The suite itself is a pytest run, so pytest is runtime.
install_requires = [
    "playwright>=1.40.0",
    "pydantic>=2.5.0",
    "pydantic-settings>=2.1.0",
    "requests>=2.31.0",
    "pytest>=7.4.0",
    "pytest-asyncio>=0.23.0",
]

# Development dependencies
extras_require = {
    "dev": [
        "black>=23.0.0",
        "flake8>=6.1.0",
        "mypy>=1.7.0",
        "pytest-cov>=4.1.0",
    ],
}

setup(
    name="caption-e2e",
    version=version,
    description="End-to-end browser test suite for the caption generator",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    author="Caption Generator QA Team",
    license="MIT",
    python_requires=">=3.11",
    packages=["caption_e2e", "caption_e2e.pages"],
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "caption-e2e=caption_e2e.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Framework :: Pytest",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
    keywords=["e2e", "playwright", "pytest", "browser", "testing"],
)
