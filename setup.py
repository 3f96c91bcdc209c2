# Copyright 2026 The Blockprint Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import re

from setuptools import setup, find_packages


def read(path):
  with open(path, encoding='utf-8') as f:
    return f.read()

version = re.search(r'^__version__ = "([^"]+)"', read('blockprint/version.py'),
                    re.MULTILINE).group(1)

setup(
    name='blockprint',
    version=version,
    description='Compose rectangular blocks of text side by side and on top '
                'of each other.',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    author='Blockprint authors',
    license='Apache-2.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.10',
    install_requires=[],
    extras_require={
        'test': ['absl-py', 'numpy>=1.26', 'pytest'],
    },
)
