"""
Setup script for the Signer Client.
"""

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_readme():
    """Read README.md file."""
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Asynchronous HTTP client for a remote wallet signing service."

def _read_requirements_file(filename):
    requirements_path = os.path.join(os.path.dirname(__file__), filename)
    requirements = []
    if os.path.exists(requirements_path):
        with open(requirements_path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    requirements.append(line)
    return requirements

# Read requirements from requirements.txt
def read_requirements():
    """Read requirements from requirements.txt."""
    return _read_requirements_file('requirements.txt') or ["httpx>=0.24.0,<1.0"]

# Read optional requirements
def read_optional_requirements():
    """Read optional requirements from requirements-optional.txt."""
    return _read_requirements_file('requirements-optional.txt')

setup(
    name="signer-client",
    version="1.0.0",
    author="Signer Client Development Team",
    author_email="dev@signer-client.example.com",
    description="Asynchronous HTTP client for a remote wallet signing service",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    url="https://github.com/example/signer-client",
    packages=find_packages(exclude=['tests*']),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Framework :: AsyncIO",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Security :: Cryptography",
    ],
    python_requires=">=3.8",
    install_requires=read_requirements(),
    extras_require={
        "yaml": ["PyYAML>=6.0,<7.0"],
        "full": read_optional_requirements(),
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-asyncio>=0.21.0",
            "mypy>=1.0.0",
            "hypothesis>=6.0.0",
            "PyYAML>=6.0,<7.0",
        ],
    },
    include_package_data=True,
    project_urls={
        "Bug Reports": "https://github.com/example/signer-client/issues",
        "Source": "https://github.com/example/signer-client",
    },
    keywords="wallet, signer, http, asyncio, httpx, client",
    zip_safe=False,
)
