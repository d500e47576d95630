"""Installation script for the 'assert-eventually' package"""

from setuptools import setup, find_packages


def main():
    """Install assert-eventually Python libraries"""
    setup(
        name='assert-eventually',
        packages=find_packages(exclude=['tests', 'tests.*']),
        use_scm_version={'fallback_version': '0.1.0'},
        python_requires='>=3.8',
        install_requires=[
            "PyHamcrest",
        ],
        extras_require={
            'test': ['pytest', 'pytest-mock'],
        },
    )


if __name__ == '__main__':
    main()
