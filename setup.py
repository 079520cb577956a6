from setuptools import find_packages, setup

setup(
    name='magisk-hluda',
    version='0.1.0',
    description='Package florida-server binaries into a Magisk module',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.10',
    install_requires=[
        'requests',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-mock',
        ],
    },
    entry_points={
        'console_scripts': [
            'magisk-hluda=magisk_hluda.cli:main',
        ],
    },
)
