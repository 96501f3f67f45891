from setuptools import setup, find_packages

setup(
    name='debugcam',
    version='0.1.0',
    author='nassimberrada',
    author_email='your.email@example.com',
    description='A free-fly debug camera controller: mouse look, scroll zoom and keyboard flight for 3D scenes.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/yourusername/debugcam',
    packages=find_packages(exclude=('tests', 'tests.*', 'examples')),
    include_package_data=True,
    install_requires=[
        'numpy',
        'glfw',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: 3D Rendering',
        'Topic :: Software Development :: Debuggers',
    ],
    python_requires='>=3.8',
)
