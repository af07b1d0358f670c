from setuptools import setup, find_packages

setup(
    name='sass-py-importer',
    version='0.1.0',
    description='Import Python data modules as Sass variables',
    py_modules=['compiler'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'lark',
        'pydantic>=2.0',
        'libsass',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
