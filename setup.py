from setuptools import setup, find_packages


install_requires = [
    'PyYAML>=5.1',
    'jsonschema>=4',
    'jinja2>=3',
    'Pillow>=9',
]

tests_require = [
    'pytest',
]


def long_description(changelog_releases=10):
    import re
    import textwrap

    readme = open('README.md').read()
    changes = ['\nChanges\n-------\n']
    version_line_re = re.compile(r'^\d\.\d+\.\d+\S*\s20\d\d-\d\d-\d\d')
    for line in open('CHANGES.txt'):
        if version_line_re.match(line):
            if changelog_releases == 0:
                break
            changelog_releases -= 1
        changes.append(line)

    changes.append(textwrap.dedent('''
        Older changes
        -------------
        See CHANGES.txt in the source distribution.
        '''))
    return readme + ''.join(changes)


setup(
    name='ZoomProbe',
    version="0.1.0",
    description='Tile discovery strategies for large zoomable images',
    long_description=long_description(7),
    long_description_content_type='text/markdown',
    author='ZoomProbe contributors',
    license='Apache Software License 2.0',
    packages=find_packages(exclude=['zoomprobe.test', 'zoomprobe.test.*']),
    include_package_data=True,
    package_data={'': ['*.json']},
    install_requires=install_requires,
    extras_require={
        'test': tests_require,
    },
    python_requires='>=3.9',
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Multimedia :: Graphics",
    ],
    zip_safe=False
)
