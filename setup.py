from setuptools import setup, find_packages

setup(
    name='nekonomicon',
    version='0.1.0',
    py_modules=['neko', 'spellbook'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'lark',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'neko = neko:main',
        ],
    },
)
