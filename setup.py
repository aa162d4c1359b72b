import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="vector3d",
    version="0.1",
    author="Vince Reuter",
    description="Three-dimensional vectors over generic, possibly unit-carrying, scalar types",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression",
        "numpy",
        "numpydoc_decorator",
        "pyyaml",
    ],
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
    entry_points={
        "console_scripts": ["vector3d=vector3d.cli:main"],
    },
)
