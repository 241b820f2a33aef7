from setuptools import setup, find_packages


setup(
    name='pychain',
    version='0.1.0',
    description='ordered middleware stacks for wsgi',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=('tests', 'examples')),
    install_requires=['ujson'],
    extras_require={
        'test': ['pytest', 'requests'],
        'dev': ['invoke'],
    },
    license='MIT',
    platforms='any',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
        'Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords='wsgi middleware chain'
)
