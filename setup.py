from setuptools import setup, find_packages

setup(
    name='togglpy',
    version='0.1.0',
    description='A CLI tool for turning a week of Toggl Track entries into a short per-project report.',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'pyperclip',
        'tzdata',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'togglpy=togglpy.__main__:main',
        ],
    },
    python_requires='>=3.9',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
