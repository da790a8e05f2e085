import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="seakeeping",
    version="0.1",
    author="author",
    author_email="author@address.com",
    description="Closed-form heave, roll and pitch responses of ships in regular waves",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=['seakeeping'],
    install_requires=[
        "numpy",
        "scipy",
        "matplotlib",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.6',
)
