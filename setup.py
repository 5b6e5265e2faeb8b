# setuptools>=65.0.0 - Core Python packaging library for building and distributing Python projects
import os

from setuptools import find_packages
from setuptools import setup


# Read the long description from README.md to provide detailed package description for PyPI
def read_long_description():
    """Read the long description from README.md file."""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    try:
        with open(readme_path, "r", encoding="utf-8") as fh:
            return fh.read()
    except FileNotFoundError:
        return "Async Python client for the Autodesk Platform Services authentication, data management, model derivative and OSS APIs."


long_description = read_long_description()


def setup_package():
    """Configure and set up the APS SDK package."""

    install_requires = [
        "httpx>=0.27.0",  # Async HTTP transport shared by every service client
        "pydantic>=2.7.0",  # Wire models, discriminated JSON-API unions and settings validation
        "loguru>=0.7.0",  # Request/response logging
        "omegaconf>=2.3.0",  # YAML configuration loading
        "aiofiles>=23.1.0",  # Async file access for signed-URL uploads and downloads
    ]

    # Development dependencies for testing, formatting, and type checking
    extras_require = {
        "dev": [
            "pytest>=7.0.0",  # Testing framework
            "black>=23.0.0",  # Code formatting for consistent style
            "mypy>=1.0.0",  # Type checking
        ]
    }

    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Internet :: WWW/HTTP",
        "Framework :: AsyncIO",
        "Operating System :: OS Independent",
        "Natural Language :: English",
    ]

    setup(
        # Package identification and metadata
        name="aps-sdk",
        version="1.0.0",
        description="Async client for the Autodesk Platform Services REST APIs",
        long_description=long_description,
        long_description_content_type="text/markdown",
        # Package discovery and structure
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        # Dependencies and requirements
        install_requires=install_requires,
        extras_require=extras_require,
        python_requires=">=3.11",
        classifiers=classifiers,
        include_package_data=True,
        keywords="aps, autodesk, forge, oauth2, oss, model-derivative, data-management",
        platforms=["any"],
        zip_safe=False,
    )


# Execute setup when script is run directly
if __name__ == "__main__":
    setup_package()
