from setuptools import setup, find_packages

setup(
    name="reedstyle-core",
    version="0.3.0",
    packages=find_packages(),
    install_requires=[
        'colorama>=0.4.6',
        'orjson'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout',
            'pytest-xdist'
        ]
    },
    entry_points={
        'console_scripts': [
            'reedstyle=reedstyle.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="OKLCH color scales and a CSS optimizer for generated stylesheets",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
