from setuptools import setup, find_packages

setup(
    name="smallestcircle",
    version="1.0.0",
    description="Smallest enclosing circles by Welzl's algorithm, recursive & iterative",
    url="https://github.com/rdatools/smallestcircle",
    author="alecramsay",
    author_email="a73cram5ay@gmail.com",
    license="MIT",
    packages=[
        "smallestcircle",
    ],
    python_requires=">=3.10",
    install_requires=[
        "rdapy",
    ],
    extras_require={
        "test": [
            "pytest",
            "rdabase",
        ],
    },
    zip_safe=False,
)
