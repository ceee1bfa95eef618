from setuptools import setup, find_packages

setup(
    name="zcount",
    description="Count zero bytes in files to spot zero-filled, corrupted data",
    license="GPL-2.0-or-later",
    author="Leonid Chaichenets",
    version="1.0",
    packages=find_packages(exclude=["test"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "dev": ["flake8", "pytest", "twine"],
    },
    entry_points={
        "console_scripts": [
            "zcount = zcount.__main__:main"
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities"
    ]
)
