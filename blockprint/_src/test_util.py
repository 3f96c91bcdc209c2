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


from __future__ import annotations

import zlib

from absl.testing import parameterized

import numpy.random as npr

from blockprint._src import doc as doc_lib
from blockprint._src.config import config

_LETTERS = list('abcdefxyz')


def rand_text(rng: npr.RandomState, max_lines: int = 4,
              max_width: int = 6) -> doc_lib.Doc:
  """A `text` doc with 1..max_lines ragged lines of 0..max_width letters."""
  n = rng.randint(1, max_lines + 1)
  lines = [''.join(rng.choice(_LETTERS, size=rng.randint(0, max_width + 1)))
           for _ in range(n)]
  return doc_lib.text('\n'.join(lines))


class BlockprintTestCase(parameterized.TestCase):
  """Base class for blockprint tests.

  Invariant checks are on for the duration of each test unless a subclass
  sets `checks = False`. Each test gets its own seeded RandomState.
  """
  checks = True

  def setUp(self):
    super().setUp()
    self.enter_context(config.override('blockprint_enable_checks',
                                       self.checks))
    # adler32 is deterministic run to run, unlike hash().
    self._rng = npr.RandomState(zlib.adler32(self._testMethodName.encode()))

  def rng(self):
    return self._rng

  def assertDocsEqual(self, x, y, msg=None):
    """Asserts that two docs agree on width, height and every line."""
    self.assertEqual(x.width, y.width, msg=msg or f"widths differ: {x} vs {y}")
    self.assertEqual(x.height, y.height, msg=msg)
    self.assertEqual(tuple(x.lines), tuple(y.lines), msg=msg)

  def assertDocShape(self, d, width, height):
    self.assertEqual((d.width, d.height), (width, height))
    self.assertLen(d.lines, max(height, 0))
