# type: ignore

import os
import types

from setuptools import setup, find_packages
from importlib.machinery import SourceFileLoader

BASE_PATH = os.path.abspath(os.path.dirname(__file__))


def get_version():
    version_filepath = os.path.join(BASE_PATH, "simplees", "version.py")
    module_name = "version"
    target_module = types.ModuleType(module_name)
    loader = SourceFileLoader(module_name, version_filepath)
    loader.exec_module(target_module)

    return getattr(target_module, "__version__")


setup(
    name="simplees",
    version=get_version(),
    description="Minimal natural evolution strategy with fixed sigma "
    "for toy continuous objectives.",
    long_description=open(os.path.join(BASE_PATH, "README.md")).read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
    ],
    packages=find_packages(exclude=["test*", "examples", "tools"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={
        "visualization": ["matplotlib", "scipy"],
        "lint": ["mypy", "flake8", "black"],
        "test": ["pytest", "hypothesis"],
        "fuzzing": ["atheris", "hypothesis"],
        "release": ["wheel", "twine"],
    },
    tests_require=[],
    keywords="evolution-strategy nes black-box-optimization",
    license="MIT License",
    include_package_data=True,
    test_suite="tests",
)
