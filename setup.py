from setuptools import setup, find_packages

setup(
    name='nsctl',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer',
        'kubernetes',
        'urllib3',
        'PyYAML',
        'jsonschema',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'nsctl=nsctl.cli:app'
        ]
    },
    description='Scan cloud projects for Kubernetes namespaces and jump straight to any of them',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
