import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='mfskmodem',
    version='0.1.0',
    author='Simply Equipped LLC',
    author_email='howard@simplyequipped.com',
    description='Multi-tone FSK acoustic data modem with FFT peak decoding',
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/simplyequipped/mfskmodem',
    packages=setuptools.find_packages(exclude=['tests']),
    install_requires=[
        'numpy',
        'scipy',
    ],
    extras_require={
        'audio': ['pyaudio'],
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.6'
)
