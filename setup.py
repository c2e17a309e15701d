""" walletcrypto build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import walletcrypto

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=walletcrypto.name,
    version=walletcrypto.__version__,
    license=walletcrypto.__license__,
    author=walletcrypto.__author__,
    author_email=walletcrypto.__author_email__,
    description="Auditable pure-python secp256k1 public key derivation",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords="bitcoin cryptography elliptic-curves secp256k1 public-key",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
