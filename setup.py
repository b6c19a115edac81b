# setup.py
from setuptools import setup, find_packages

setup(
    name="sdn",
    version="0.1.0",
    description="Reader and canonical printer for SDN, a small Lisp-like data notation",
    packages=find_packages(include=["sdn", "sdn.*", "sdn_lsp", "sdn_lsp.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0,<2024",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "sdn=sdn.__main__:main",
            "sdn-ls=sdn_lsp.server:main",
        ],
    },
    zip_safe=False,
)
