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
#
# Box-style document layout.
#
# A Doc is a fully materialized rectangle of text. Blocks are composed
# horizontally with `beside` and vertically with `atop`; both always build a
# new Doc and recompute its dimensions from the operands.
#
# References:
# Hughes, J. 1995. The Design of a Pretty-printing Library. Advanced
# Functional Programming, pp.53-96.

from __future__ import annotations

import logging
from typing import NamedTuple

from blockprint._src.config import config
from blockprint._src import errors
from blockprint._src.util import (longest, pad_right, pad_with, replicate,
                                  spaces, split_lines, take)

logger = logging.getLogger(__name__)


class Doc(NamedTuple):
  """An immutable rectangular block of text.

  `height` is the number of entries in `lines`. `width` is the widest line for
  docs built by `text`, and the declared width for `empty`. Lines are not
  padded to `width` until they end up on the left of a `beside`.
  """
  width: int
  height: int
  lines: tuple[str, ...]

  def __str__(self) -> str:
    return render(self)


def empty(w: int, h: int) -> Doc:
  """A blank `w` by `h` block.

  Every row is a single space, whatever `w` is. Negative sizes are accepted
  as-is; a negative `h` gives no lines but keeps the negative height, which
  later compositions do arithmetic on.
  """
  return _checked(Doc(w, h, tuple(replicate(h, ' '))))


def text(s: str) -> Doc:
  """A block holding `s`, one row per newline-separated segment."""
  lines = split_lines(s)
  return _checked(Doc(longest(lines), len(lines), tuple(lines)))


def width(d: Doc) -> int:
  return d.width

def height(d: Doc) -> int:
  return d.height

def render(d: Doc) -> str:
  return '\n'.join(d.lines)


def beside(d1: Doc, d2: Doc) -> Doc:
  """Places `d1` immediately to the left of `d2`.

  Rows of `d1` are right-padded to `d1.width`. If `d2` is taller, `d1` is
  extended with rows of `d1.width` spaces. If `d1` is taller, its extra rows
  get nothing appended. The result width is the sum of the declared widths.

  >>> print(render(beside(text("a\\nbbb"), text("X\\nY"))))
  a  X
  bbbY
  """
  h = max(d1.height, d2.height)
  left = [pad_right(line, d1.width) for line in d1.lines]
  left.extend(replicate(h - d1.height, spaces(d1.width)))
  rows = [l + r for l, r in zip(left, pad_with(d2.lines, ''))]
  return _checked(Doc(d1.width + d2.width, h, tuple(take(rows, h))), d1, d2)


def atop(d1: Doc, d2: Doc) -> Doc:
  """Stacks `d1` directly above `d2`. Rows are left unpadded."""
  return _checked(Doc(max(d1.width, d2.width), d1.height + d2.height,
                      d1.lines + d2.lines), d1, d2)


def indent(n: int, d: Doc) -> Doc:
  """Shifts `d` right by `n` columns."""
  margin = Doc(max(n, 0), d.height, tuple(replicate(d.height, spaces(n))))
  return beside(margin, d)


def check_doc(d: Doc) -> None:
  """Raises DocInvariantError if `d`'s lines are malformed.

  Checks that `lines` is a tuple of str with no newlines and that there are
  `height` of them. `width` is not validated: `empty` and `beside` both
  produce docs whose declared width differs from their longest line.
  """
  if not isinstance(d.lines, tuple):
    raise errors.DocInvariantError(
        f"Doc lines must be a tuple, got {type(d.lines).__name__}", d)
  for i, line in enumerate(d.lines):
    if not isinstance(line, str):
      raise errors.DocInvariantError(
          f"Doc line {i} is a {type(line).__name__}, not a str", d)
    if '\n' in line:
      raise errors.DocInvariantError(
          f"Doc line {i} contains a newline: {line!r}", d)
  if len(d.lines) != d.height:
    raise errors.DocInvariantError(
        f"Doc has height {d.height} but {len(d.lines)} lines", d)


def _checked(result: Doc, *operands: Doc) -> Doc:
  if not config.blockprint_enable_checks:
    return result
  if any(d.width < 0 or d.height < 0 for d in (result, *operands)):
    # Negative dimensions carry no line-count invariant.
    logger.debug("Skipping checks for %dx%d doc built from negative sizes",
                 result.width, result.height)
    return result
  check_doc(result)
  return result
