from setuptools import setup, find_packages

setup(
    name='togglCheck',
    version='0.1.0',
    description='A CLI tool for checking Toggl time entries for overlaps.',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'markdown',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'togglcheck=togglcheck.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['togglcheck.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
