from setuptools import setup


setup(
    name='sohva',
    version='0.1.0',
    description='Blocking CouchDB client for Tornado',
    license='MIT',
    packages=['sohva'],
    install_requires=['tornado>=5.1'],
    extras_require={
        'test': ['pytest'],
        },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
        ]
)
