import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='sprcracker',
    version='0.1.0',
    description='Tools for decoding SPR sprite container files.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_namespace_packages(where="src"),
    package_dir={"": "src"},
    package_data={'sprcracker.spr': ['*.pyi']},
    install_requires=[
        'deal',
        'numpy',
        'Pillow',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['sprcracker=sprcracker.runner:app'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Games/Entertainment',
        'Topic :: Utilities'
    ],
    python_requires='>=3.8',
    keywords='sprite spr palette frame decode extract parse'
)
